"""
Turns categorized suggestion results into the flat list shown under the
search input.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from searchbox.domain.protocols import CategorizedResults
from searchbox.domain.types import (
    FILTER_CATEGORIES,
    DisplayItem,
    RawSuggestion,
    SuggestionCategory,
    SuggestionPayload,
    category_for_key,
)
from searchbox.logger import get_logger

logger = get_logger("composer")

_LABEL_PREFIXES = {
    SuggestionCategory.NONE: "Search for ",
    SuggestionCategory.AUTHOR: "Posts by: ",
    SuggestionCategory.THREAD: "Thread: ",
    SuggestionCategory.SUBFORUM: "Subforum: ",
}


def display_label(category: SuggestionCategory, text: str) -> str:
    return f"{_LABEL_PREFIXES[category]}{text}"


def to_display_item(
    category: SuggestionCategory,
    text: str,
    payload: Optional[SuggestionPayload] = None,
) -> DisplayItem:
    """Convert one suggestion into the item shown in the autocomplete menu."""
    return DisplayItem(
        category=category,
        text=text,
        display_label=display_label(category, text),
        entity_id=payload.id if payload else None,
        entity_slug=payload.slug if payload else None,
    )


def _group_by_category(results: CategorizedResults) -> dict[SuggestionCategory, Sequence[RawSuggestion]]:
    grouped: dict[SuggestionCategory, list[RawSuggestion]] = {}
    for key, suggestions in results.items():
        category = category_for_key(key)
        grouped.setdefault(category, []).extend(suggestions or ())
    return grouped


def compose(query_text: str, categorized_results: Optional[CategorizedResults]) -> list[DisplayItem]:
    """
    Build the display list for ``query_text`` from all suggestion results.

    Categories appear in declaration order (author, thread, subforum) no
    matter how the mapping is ordered; each keeps its source order. The
    plain "Search for ..." item is always last.

    Raises:
        UnknownCategory: if a result key is not a filter category
    """
    grouped = _group_by_category(categorized_results or {})

    items: list[DisplayItem] = []
    for category in FILTER_CATEGORIES:
        for suggestion in grouped.get(category, ()):
            # The result-set key decides the category, not the entry itself
            items.append(to_display_item(category, suggestion.text, suggestion.payload))

    items.append(to_display_item(SuggestionCategory.NONE, query_text))
    logger.debug(f"Composed {len(items)} display items for query {query_text!r}")
    return items
