"""Consolidated exceptions for sortkit.

All custom exceptions are defined here to provide a single source of truth
for error handling across the package.
"""


class SortKitError(Exception):
    """Base exception for sortkit errors"""

    pass


class StrategyError(SortKitError):
    """Base exception for strategy selection errors"""

    pass


class NoStrategyBoundError(StrategyError):
    """Raised when a sort is requested before any strategy was set"""

    pass


class UnknownStrategyError(StrategyError, ValueError):
    """Raised when a strategy name is not registered"""

    pass


class ConfigurationError(SortKitError):
    """Raised when configuration is invalid or missing"""

    pass
