"""Suggestion categories and their mapping from suggestion service keys."""

from enum import Enum
from typing import Any

from searchbox.domain.exceptions import UnknownCategory

__all__ = [
    "SuggestionCategory",
    "FILTER_CATEGORIES",
    "SERVICE_KEYS",
    "category_for_key",
]


class SuggestionCategory(Enum):
    """Classification of a suggestion or search filter.

    Declaration order is significant: it is the order categories appear in
    the suggestion list and the order filter parameters appear in search URLs.
    ``NONE`` is synthetic and stands for a plain text search.
    """

    NONE = "none"
    AUTHOR = "author"
    THREAD = "thread"
    SUBFORUM = "subforum"


# Categories that can be accumulated as search filters
FILTER_CATEGORIES: tuple[SuggestionCategory, ...] = (
    SuggestionCategory.AUTHOR,
    SuggestionCategory.THREAD,
    SuggestionCategory.SUBFORUM,
)

# Result-set keys used by the suggestion service
SERVICE_KEYS: dict[str, SuggestionCategory] = {
    "users": SuggestionCategory.AUTHOR,
    "threads": SuggestionCategory.THREAD,
    "subforums": SuggestionCategory.SUBFORUM,
}


def category_for_key(key: Any) -> SuggestionCategory:
    """Normalize a result-set key into a filter category.

    Accepts ``SuggestionCategory`` members, their string values
    (``"author"``) and the service's plural keys (``"users"``).

    Raises:
        UnknownCategory: for ``NONE`` or any unrecognised key
    """
    if isinstance(key, SuggestionCategory):
        category = key
    elif isinstance(key, str) and key in SERVICE_KEYS:
        category = SERVICE_KEYS[key]
    else:
        try:
            category = SuggestionCategory(key)
        except ValueError:
            raise UnknownCategory(key) from None

    if category not in FILTER_CATEGORIES:
        raise UnknownCategory(key)
    return category
