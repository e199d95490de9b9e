"""Sort context holding the currently selected strategy"""

from loguru import logger

from sortkit.domain.strategies.base import SortStrategy
from sortkit.shared.exceptions import NoStrategyBoundError


class SortContext:
    """Context object delegating sort requests to one bound strategy.

    The strategy is injected by the caller, either at construction or
    later through ``set_strategy``, and can be swapped between sorts.
    """

    def __init__(self, strategy: SortStrategy | None = None):
        self._strategy = strategy

    @property
    def strategy(self) -> SortStrategy | None:
        """Currently bound strategy, or None if never set"""
        return self._strategy

    def set_strategy(self, strategy: SortStrategy) -> None:
        """Replace the bound strategy.

        Args:
            strategy: Strategy used by subsequent ``execute_sort`` calls
        """
        logger.debug(f"Binding sort strategy: {strategy.name}")
        self._strategy = strategy

    def execute_sort(self, items: list[str]) -> None:
        """Sort ``items`` in place with the bound strategy.

        Args:
            items: List of strings owned by the caller

        Raises:
            NoStrategyBoundError: If no strategy has been set
        """
        if self._strategy is None:
            raise NoStrategyBoundError(
                "No sort strategy bound. Call set_strategy() first."
            )
        self._strategy.sort(items)
