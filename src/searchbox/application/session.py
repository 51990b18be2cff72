"""
SearchSession - owner of the search box state.

The session replaces UI lifecycle hooks with explicit commands:

- ``change_text`` when the input changes (schedules a suggestion fetch)
- ``select`` for next/previous navigation through the suggestions
- ``complete`` to turn the selected suggestion into a filter
- ``submit`` to search or navigate with the selected suggestion

Suggestion fetches are fire-and-forget. A response only replaces the
suggestions when it was requested for the text that is still current.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

from searchbox.config import SearchBoxConfig
from searchbox.core import Direction, SelectionList
from searchbox.domain.exceptions import UnknownCategory
from searchbox.domain.protocols import (
    CategorizedResults,
    Navigator,
    SearchDispatcher,
    SuggestionProvider,
)
from searchbox.domain.types import DisplayItem, RouteRequest, SearchRequest
from searchbox.logger import get_logger

from .composer import compose
from .query_state import QueryState, complete_with, update_text
from .resolver import build_search_url, resolve

logger = get_logger("session")

SuggestionsListener = Callable[[SelectionList[DisplayItem]], None]


class SearchSession:
    """Explicit state holder driving the autocomplete core."""

    def __init__(
        self,
        provider: SuggestionProvider,
        navigator: Navigator,
        dispatcher: SearchDispatcher,
        config: Optional[SearchBoxConfig] = None,
        on_suggestions: Optional[SuggestionsListener] = None,
    ):
        """
        Initialize the session.

        Args:
            provider: Source of raw suggestions
            navigator: Receives direct thread/subforum navigations
            dispatcher: Receives search submissions
            config: Search box configuration (defaults apply when omitted)
            on_suggestions: Called whenever the suggestion list is rebuilt
        """
        self.provider = provider
        self.navigator = navigator
        self.dispatcher = dispatcher
        self.config = config or SearchBoxConfig()
        self.on_suggestions = on_suggestions

        self.state = QueryState.initial()
        self.suggestions: SelectionList[DisplayItem] = SelectionList.create(compose(self.state.text, {}))
        self._fetch_task: asyncio.Task | None = None
        # Strong references to in-flight fetches
        self._fetch_tasks: set[asyncio.Task] = set()

    @property
    def text(self) -> str:
        return self.state.text

    @property
    def selected(self) -> Optional[DisplayItem]:
        return self.suggestions.selected

    @property
    def fetch_task(self) -> asyncio.Task | None:
        """Most recently scheduled suggestion fetch."""
        return self._fetch_task

    @property
    def pending_fetches(self) -> frozenset[asyncio.Task]:
        """Suggestion fetches that have not finished yet."""
        return frozenset(self._fetch_tasks)

    def change_text(self, text: str) -> asyncio.Task | None:
        """
        Record new input text and request suggestions for it.

        Returns:
            The scheduled fetch task, or None when the text did not change or
            no event loop is running
        """
        if text == self.state.text:
            return None

        self.state = update_text(self.state, text)
        # Show the plain search item right away, suggestions arrive later
        self._rebuild(compose(text, {}))
        return self._schedule_fetch(text)

    def _schedule_fetch(self, text: str) -> asyncio.Task | None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            logger.debug(f"No running event loop, suggestions for {text!r} not fetched")
            return None

        task = asyncio.create_task(self.fetch_suggestions(text))
        self._fetch_tasks.add(task)
        task.add_done_callback(self._fetch_tasks.discard)
        self._fetch_task = task
        return task

    async def fetch_suggestions(self, text: str) -> bool:
        """
        Fetch suggestions for ``text`` and apply them if still current.

        Provider failures and responses with unknown result sets degrade to an
        empty result for this round.

        Returns:
            True if the suggestions were applied
        """
        try:
            results = await self.provider.fetch(text)
        except Exception:
            logger.exception(f"Suggestion fetch failed for {text!r}")
            results = {}

        try:
            return self.receive_suggestions(text, results)
        except UnknownCategory:
            logger.exception(f"Suggestion response for {text!r} has an unknown result set")
            return self.receive_suggestions(text, {})

    def receive_suggestions(self, text: str, results: Optional[CategorizedResults]) -> bool:
        """Apply a suggestion response unless it belongs to an outdated text."""
        if text != self.state.text:
            logger.debug(f"Discarding stale suggestions for {text!r} (current {self.state.text!r})")
            return False

        self._rebuild(compose(text, results))
        return True

    def _rebuild(self, items: list[DisplayItem]) -> None:
        self.suggestions = SelectionList.create(items)
        if self.on_suggestions is not None:
            self.on_suggestions(self.suggestions)

    def select(self, direction: Direction | str) -> Optional[DisplayItem]:
        """Move the selection and return the newly selected item."""
        self.suggestions = self.suggestions.select(direction)
        logger.debug(f"Selection moved {Direction(direction).value} to {self.suggestions.selected_index}")
        return self.suggestions.selected

    def complete(self) -> QueryState:
        """Complete the selected suggestion into a filter."""
        new_state = complete_with(self.state, self.suggestions.selected)
        self._apply_state(new_state)
        return self.state

    def submit(self) -> SearchRequest | RouteRequest | None:
        """
        Resolve the selected suggestion and emit its action.

        Returns:
            The emitted action, or None when nothing is selected
        """
        item = self.suggestions.selected
        if item is None:
            logger.debug("Submit ignored: no suggestion selected")
            return None
        return self.submit_item(item)

    def submit_item(self, item: DisplayItem) -> SearchRequest | RouteRequest:
        """
        Resolve ``item`` and emit exactly one search or navigation.

        Raises:
            UnknownCategory: if the item's category is not known
        """
        resolution = resolve(self.state, item)
        action = resolution.action

        if isinstance(action, SearchRequest):
            url = build_search_url(action, self.config.search_path)
            logger.info(f"Dispatching search: {url}")
            self.dispatcher.search(action, url)
        else:
            logger.info(f"Navigating to {action.kind.value} {action.entity_id}/{action.entity_slug}")
            self.navigator.navigate(action)

        self._apply_state(resolution.state)
        return action

    def _apply_state(self, new_state: QueryState) -> None:
        text_changed = new_state.text != self.state.text
        self.state = new_state
        if text_changed:
            self._rebuild(compose(new_state.text, {}))
            self._schedule_fetch(new_state.text)
