"""Application layer - the autocomplete core and the session that drives it."""

from .composer import compose, display_label, to_display_item
from .payload import parse_suggestion_response
from .query_state import QueryState, complete_with, filter_params, update_text
from .resolver import Resolution, build_search_url, resolve
from .session import SearchSession

__all__ = [
    "compose",
    "display_label",
    "to_display_item",
    "parse_suggestion_response",
    "QueryState",
    "complete_with",
    "filter_params",
    "update_text",
    "Resolution",
    "build_search_url",
    "resolve",
    "SearchSession",
]
