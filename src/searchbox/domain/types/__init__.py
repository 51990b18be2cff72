"""Shared domain types."""

from searchbox.domain.types.actions import RouteKind, RouteRequest, SearchRequest
from searchbox.domain.types.categories import (
    FILTER_CATEGORIES,
    SERVICE_KEYS,
    SuggestionCategory,
    category_for_key,
)
from searchbox.domain.types.suggestions import DisplayItem, RawSuggestion, SuggestionPayload

__all__ = [
    "SuggestionCategory",
    "FILTER_CATEGORIES",
    "SERVICE_KEYS",
    "category_for_key",
    "SuggestionPayload",
    "RawSuggestion",
    "DisplayItem",
    "RouteKind",
    "RouteRequest",
    "SearchRequest",
]
