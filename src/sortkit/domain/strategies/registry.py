"""Strategy registry for managing sort strategy factories"""

from collections.abc import Callable

from sortkit.domain.strategies.base import SortStrategy
from sortkit.shared.exceptions import UnknownStrategyError


class StrategyRegistry:
    """Registry for managing sort strategy factories.

    This class provides a central registry for strategies,
    allowing strategies to be looked up and built by short name.
    """

    def __init__(self):
        self._factories: dict[str, Callable[[], SortStrategy]] = {}

    def register(self, name: str, factory: Callable[[], SortStrategy]) -> None:
        """Register a strategy factory.

        Registering an existing name replaces the previous factory.

        Args:
            name: Strategy identifier
            factory: Zero-argument callable that creates strategy instances
        """
        self._factories[name] = factory

    def get(self, name: str) -> SortStrategy:
        """Build a strategy instance by name.

        Args:
            name: Strategy identifier

        Returns:
            New strategy instance

        Raises:
            UnknownStrategyError: If strategy not found
        """
        if name not in self._factories:
            raise UnknownStrategyError(
                f"Unknown strategy: {name}. "
                f"Available strategies: {self.list_available()}"
            )
        return self._factories[name]()

    def list_available(self) -> list[str]:
        """List all available strategy names.

        Returns:
            List of strategy identifiers in registration order
        """
        return list(self._factories.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._factories


def register_strategy(name: str) -> Callable:
    """Decorator to register a strategy class or factory.

    Args:
        name: Strategy identifier

    Returns:
        Decorator function
    """

    def decorator(
        factory: Callable[[], SortStrategy],
    ) -> Callable[[], SortStrategy]:
        registry.register(name, factory)
        return factory

    return decorator


registry = StrategyRegistry()
