"""
Cyclic single-selection over an ordered sequence of items.

A ``SelectionList`` never changes its items; navigation produces a new list
with a different selected index. With no current selection, ``next`` lands on
the first item and ``prev`` on the last one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Generic, Optional, TypeVar

__all__ = ["Direction", "SelectionList", "selection_list", "select", "selected"]

T = TypeVar("T")


class Direction(Enum):
    """Navigation direction."""

    NEXT = "next"
    PREV = "prev"


_STEP = {Direction.NEXT: 1, Direction.PREV: -1}


@dataclass(frozen=True, slots=True)
class SelectionList(Generic[T]):
    """Immutable list of items with at most one selected index."""

    items: tuple[T, ...] = ()
    selected_index: Optional[int] = None

    def __post_init__(self) -> None:
        index = self.selected_index
        if index is not None and not 0 <= index < len(self.items):
            raise IndexError(f"selected_index {index} out of range for {len(self.items)} items")

    @classmethod
    def create(cls, items: Iterable[T]) -> SelectionList[T]:
        return cls(items=tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def select(self, direction: Direction | str) -> SelectionList[T]:
        """Return a new list with the selection moved one step in ``direction``."""
        step = _STEP[Direction(direction)]
        count = len(self.items)
        if count == 0:
            return self

        if self.selected_index is None:
            # No selection sits just before index 0
            index = 0 if step > 0 else count - 1
        else:
            index = (self.selected_index + step) % count
        return replace(self, selected_index=index)

    @property
    def selected(self) -> Optional[T]:
        if self.selected_index is None:
            return None
        return self.items[self.selected_index]


def selection_list(items: Iterable[T]) -> SelectionList[T]:
    """Create a list with no selection."""
    return SelectionList.create(items)


def select(direction: Direction | str, lst: SelectionList[T]) -> SelectionList[T]:
    """Move the selection of ``lst`` one step in ``direction``."""
    return lst.select(direction)


def selected(lst: SelectionList[T]) -> Optional[T]:
    """Return the selected item of ``lst`` or ``None``."""
    return lst.selected
