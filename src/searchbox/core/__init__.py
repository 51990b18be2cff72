"""Core building blocks independent of suggestion semantics."""

from searchbox.core.selection_list import Direction, SelectionList, select, selected, selection_list

__all__ = ["Direction", "SelectionList", "select", "selected", "selection_list"]
