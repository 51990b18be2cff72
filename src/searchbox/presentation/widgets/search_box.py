"""
SearchBox - autocomplete search input for the forum.

Composes a ``SearchInput`` and a ``SuggestionList`` around a
``SearchSession``. Widget events are translated into session commands; the
session decides what is shown and what a submission does.
"""

from typing import Optional

from textual import events
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Input, OptionList

from searchbox.application import SearchSession
from searchbox.config import SearchBoxConfig
from searchbox.core import SelectionList
from searchbox.domain.protocols import Navigator, SearchDispatcher, SuggestionProvider
from searchbox.domain.types import DisplayItem
from searchbox.logger import get_logger

from .search_input import SearchInput
from .suggestion_list import SuggestionList

logger = get_logger("search_box")

# Delay before hiding suggestions on blur so pointer clicks on a row land
BLUR_HIDE_DELAY = 0.1


def should_show_suggestions(focused: bool, text: str) -> bool:
    """Suggestions are visible while the input has focus and holds text."""
    return focused and bool(text)


class SearchBox(Widget):
    """Search input with an autocomplete suggestion list."""

    DEFAULT_CSS = """
    SearchBox {
        height: auto;
    }

    SearchBox SuggestionList {
        height: auto;
        max-height: 12;
    }
    """

    def __init__(
        self,
        provider: SuggestionProvider,
        navigator: Navigator,
        dispatcher: SearchDispatcher,
        config: Optional[SearchBoxConfig] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.session = SearchSession(provider, navigator, dispatcher, config)
        self._input_focused = False

    def compose(self) -> ComposeResult:
        yield SearchInput(placeholder="Search", id="search-query")
        yield SuggestionList(id="suggestions")

    @property
    def search_input(self) -> SearchInput:
        return self.query_one(SearchInput)

    @property
    def suggestion_list(self) -> SuggestionList:
        return self.query_one(SuggestionList)

    def on_mount(self) -> None:
        self.session.on_suggestions = self._show_suggestions
        self._show_suggestions(self.session.suggestions)

    def _show_suggestions(self, suggestions: SelectionList[DisplayItem]) -> None:
        self.suggestion_list.show_suggestions(suggestions)
        self._update_visibility()

    def _update_visibility(self) -> None:
        self.suggestion_list.display = should_show_suggestions(self._input_focused, self.session.text)

    def _sync_input(self) -> None:
        """Reflect the session text in the input after completion or submit."""
        if self.search_input.value != self.session.text:
            self.search_input.value = self.session.text
        self._update_visibility()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        if isinstance(event.widget, SearchInput):
            self._input_focused = True
            self._update_visibility()

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        if isinstance(event.widget, SearchInput):
            self.set_timer(BLUR_HIDE_DELAY, self._hide_after_blur)

    def _hide_after_blur(self) -> None:
        self._input_focused = self.search_input.has_focus
        self._update_visibility()

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.session.change_text(event.value)
        self._update_visibility()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.session.submit()
        self._sync_input()

    def on_search_input_navigate(self, message: SearchInput.Navigate) -> None:
        message.stop()
        self.session.select(message.direction)
        self.suggestion_list.show_selection(self.session.suggestions)

    def on_search_input_complete(self, message: SearchInput.Complete) -> None:
        message.stop()
        self.session.complete()
        self._sync_input()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        item = self.suggestion_list.item_at(event.option_index)
        logger.debug(f"Suggestion clicked: {item.display_label!r}")
        self.session.submit_item(item)
        self._sync_input()
