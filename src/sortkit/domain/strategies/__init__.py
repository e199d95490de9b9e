"""Sort strategy abstractions and implementations"""

from sortkit.domain.strategies.base import SortStrategy
from sortkit.domain.strategies.context import SortContext
from sortkit.domain.strategies.registry import (
    StrategyRegistry,
    register_strategy,
)

# Imported for their registration side effect
from sortkit.domain.strategies.merge_sort import MergeSort
from sortkit.domain.strategies.quick_sort import QuickSort
from sortkit.domain.strategies.shell_sort import ShellSort

__all__ = [
    "SortStrategy",
    "SortContext",
    "StrategyRegistry",
    "register_strategy",
    "QuickSort",
    "MergeSort",
    "ShellSort",
]
