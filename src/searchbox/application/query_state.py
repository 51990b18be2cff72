"""
Query state: free text plus filters accumulated by completing suggestions.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Optional

from searchbox.domain.exceptions import UnknownCategory
from searchbox.domain.types import FILTER_CATEGORIES, DisplayItem, SuggestionCategory


def _empty_filters() -> Mapping[SuggestionCategory, Optional[str]]:
    return MappingProxyType({category: None for category in FILTER_CATEGORIES})


@dataclass(frozen=True)
class QueryState:
    """Text typed by the user and the filters completed so far.

    ``filters`` only ever holds author, thread and subforum entries.
    """

    text: str = ""
    filters: Mapping[SuggestionCategory, Optional[str]] = field(default_factory=_empty_filters)

    def __post_init__(self) -> None:
        for category in self.filters:
            if category not in FILTER_CATEGORIES:
                raise UnknownCategory(category)
        # Freeze a copy so callers cannot mutate the state behind our back
        merged = {category: None for category in FILTER_CATEGORIES}
        merged.update(self.filters)
        object.__setattr__(self, "filters", MappingProxyType(merged))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryState):
            return NotImplemented
        return self.text == other.text and dict(self.filters) == dict(other.filters)

    def __hash__(self) -> int:
        return hash((self.text, tuple(self.filters.get(category) for category in FILTER_CATEGORIES)))

    @classmethod
    def initial(cls) -> QueryState:
        return cls()

    def filter_value(self, category: SuggestionCategory) -> Optional[str]:
        return self.filters.get(category)


def update_text(state: QueryState, new_text: str) -> QueryState:
    """Replace the free text, keeping filters."""
    if state.text == new_text:
        return state
    return replace(state, text=new_text)


def complete_with(state: QueryState, item: Optional[DisplayItem]) -> QueryState:
    """
    Promote ``item`` from free text into a filter of its category.

    The text is cleared so the user can keep refining. Plain text items (and
    no item at all) have nothing to complete and leave ``state`` as is.
    Filters of other categories are never touched.
    """
    if item is None or item.category is SuggestionCategory.NONE:
        return state
    if item.category not in FILTER_CATEGORIES:
        raise UnknownCategory(item.category)

    filters = dict(state.filters)
    filters[item.category] = item.text
    return QueryState(text="", filters=filters)


def filter_params(state: QueryState) -> tuple[tuple[str, str], ...]:
    """Non-empty filters as ``(name, value)`` pairs in category declaration order."""
    return tuple(
        (category.value, value)
        for category in FILTER_CATEGORIES
        if (value := state.filters.get(category))
    )
