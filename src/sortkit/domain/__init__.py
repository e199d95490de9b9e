"""Domain layer for sortkit

Sort strategy interface, concrete variants and the context that holds them.
No infrastructure dependencies - domain layer only.
"""

from . import strategies

__all__ = ["strategies"]
