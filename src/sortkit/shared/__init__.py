"""Shared utilities for the sortkit package."""

from .exceptions import (
    ConfigurationError,
    NoStrategyBoundError,
    SortKitError,
    StrategyError,
    UnknownStrategyError,
)

__all__ = [
    "SortKitError",
    "StrategyError",
    "NoStrategyBoundError",
    "UnknownStrategyError",
    "ConfigurationError",
]
