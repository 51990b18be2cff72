"""Suggestion types: raw service candidates and their display form."""

from dataclasses import dataclass
from typing import Optional

from searchbox.domain.types.categories import SuggestionCategory

__all__ = ["SuggestionPayload", "RawSuggestion", "DisplayItem"]


@dataclass(frozen=True, slots=True)
class SuggestionPayload:
    """Entity reference attached to thread and subforum suggestions."""

    id: Optional[int | str] = None
    slug: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RawSuggestion:
    """One candidate returned by the suggestion service."""

    category: SuggestionCategory
    text: str
    payload: Optional[SuggestionPayload] = None


@dataclass(frozen=True, slots=True)
class DisplayItem:
    """Normalized, render-ready suggestion.

    ``entity_id`` and ``entity_slug`` are only meaningful for thread and
    subforum items; they are passed through as received, missing values
    included.
    """

    category: SuggestionCategory
    text: str
    display_label: str
    entity_id: Optional[int | str] = None
    entity_slug: Optional[str] = None
