"""Quick sort strategy backed by the built-in list sort"""

from sortkit.domain.strategies.base import SortStrategy
from sortkit.domain.strategies.registry import register_strategy


@register_strategy("quick")
class QuickSort(SortStrategy):
    """Sorts in place into non-decreasing default string order"""

    @property
    def name(self) -> str:
        return "QuickSort"

    def sort(self, items: list[str]) -> None:
        items.sort()
        self.notify_sorted(items)
