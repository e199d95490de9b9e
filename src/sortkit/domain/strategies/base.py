"""Base sort strategy interface"""

from __future__ import annotations

from abc import ABC, abstractmethod

from loguru import logger


class SortStrategy(ABC):
    """Base sort strategy interface

    All sort strategies must implement this interface.
    A strategy receives a mutable list of strings and may reorder it in
    place. It never changes the list's length and returns nothing.

    Every call to ``sort`` writes exactly one completion line to standard
    output, even when the list is empty.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Algorithm name identifier, e.g. ``QuickSort``"""

    @abstractmethod
    def sort(self, items: list[str]) -> None:
        """Sort ``items`` in place

        Args:
            items: List of strings owned by the caller
        """

    @property
    def completion_message(self) -> str:
        """Line written to standard output after each sort"""
        return f"{self.name}ed list "

    def notify_sorted(self, items: list[str]) -> None:
        """Write the completion line for a finished sort

        Args:
            items: The list that was just handled
        """
        logger.debug(f"{self.name} handled {len(items)} item(s)")
        print(self.completion_message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
