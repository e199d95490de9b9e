"""Shell sort strategy

The reordering step is not implemented: the list is left untouched and only
the completion line is written.
"""

from sortkit.domain.strategies.base import SortStrategy
from sortkit.domain.strategies.registry import register_strategy


@register_strategy("shell")
class ShellSort(SortStrategy):
    """Placeholder shell sort, never reorders the list"""

    @property
    def name(self) -> str:
        return "ShellSort"

    def sort(self, items: list[str]) -> None:
        self.notify_sorted(items)
