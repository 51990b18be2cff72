"""Protocols for the external services the search box depends on."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from searchbox.domain.types import RawSuggestion, RouteRequest, SearchRequest

__all__ = ["CategorizedResults", "SuggestionProvider", "Navigator", "SearchDispatcher"]

# Result sets keyed by SuggestionCategory or a service key such as "users"
CategorizedResults = Mapping[Any, Sequence[RawSuggestion]]


class SuggestionProvider(Protocol):
    """Source of raw suggestions for the current query text."""

    async def fetch(self, text: str) -> CategorizedResults:
        """Fetch categorized suggestions for ``text``.

        Any subset of categories may be absent or empty. Failures are raised;
        the caller degrades them to an empty result.
        """
        ...


class Navigator(Protocol):
    """Client-side navigation to content pages."""

    def navigate(self, route: RouteRequest) -> None:
        """Navigate to the thread or subforum described by ``route``."""
        ...


class SearchDispatcher(Protocol):
    """Navigation to the search results page."""

    def search(self, request: SearchRequest, url: str) -> None:
        """Show results for ``request``; ``url`` is the encoded results URL."""
        ...
