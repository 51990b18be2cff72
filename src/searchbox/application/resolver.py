"""
Decides what submitting a suggestion does: a filtered text search or a
direct jump to a thread/subforum page.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from urllib.parse import urlencode

from searchbox.config import DEFAULT_SEARCH_PATH
from searchbox.domain.exceptions import UnknownCategory
from searchbox.domain.types import (
    DisplayItem,
    RouteKind,
    RouteRequest,
    SearchRequest,
    SuggestionCategory,
)
from searchbox.logger import get_logger

from .query_state import QueryState, complete_with, filter_params

logger = get_logger("resolver")

SEARCH_CATEGORIES = frozenset({SuggestionCategory.NONE, SuggestionCategory.AUTHOR})

ROUTE_KINDS = {
    SuggestionCategory.THREAD: RouteKind.THREAD,
    SuggestionCategory.SUBFORUM: RouteKind.SUBFORUM,
}


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of submitting an item.

    ``action`` is the single outbound action; ``state`` is the query state
    the session continues with.
    """

    state: QueryState
    action: SearchRequest | RouteRequest


def resolve(state: QueryState, item: DisplayItem) -> Resolution:
    """
    Resolve a submitted ``item`` against the current query state.

    Plain text and author items complete into the state and become a search
    for the remaining text plus every non-empty filter; the input is cleared
    afterwards. Thread and subforum items navigate straight to their page and
    leave the state alone.

    Raises:
        UnknownCategory: if the item's category is not a known category
    """
    category = item.category
    if not isinstance(category, SuggestionCategory):
        raise UnknownCategory(category)

    if category in SEARCH_CATEGORIES:
        completed = complete_with(state, item)
        request = SearchRequest(text=completed.text, filter_params=filter_params(completed))
        logger.info(f"Resolved {category.value} item to search {request}")
        return Resolution(state=replace(completed, text=""), action=request)

    if category in ROUTE_KINDS:
        route = RouteRequest(kind=ROUTE_KINDS[category], entity_id=item.entity_id, entity_slug=item.entity_slug)
        if route.entity_id is None or route.entity_slug is None:
            logger.warning(f"Route for {item.text!r} is missing its entity reference: {route}")
        logger.info(f"Resolved {category.value} item to route {route}")
        return Resolution(state=state, action=route)

    raise UnknownCategory(category)


def build_search_url(request: SearchRequest, search_path: str = DEFAULT_SEARCH_PATH) -> str:
    """Encode ``request`` as ``<search_path>?text=<text>&name=value...``."""
    query = urlencode([("text", request.text), *request.filter_params])
    return f"{search_path}?{query}"
