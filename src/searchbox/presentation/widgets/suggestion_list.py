"""
SuggestionList - renders the composed suggestions under the search input.
"""

from rich.text import Text
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from searchbox.core import SelectionList
from searchbox.domain.types import DisplayItem, SuggestionCategory

CATEGORY_STYLES = {
    SuggestionCategory.NONE: "bold",
    SuggestionCategory.AUTHOR: "cyan",
    SuggestionCategory.THREAD: "green",
    SuggestionCategory.SUBFORUM: "magenta",
}


class SuggestionList(OptionList):
    """Read-only view of a ``SelectionList`` of display items.

    The list never takes focus; the selection is driven by the input's
    navigation keys and mirrored here as the highlighted option.
    """

    can_focus = False

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._items: tuple[DisplayItem, ...] = ()

    def show_suggestions(self, suggestions: SelectionList[DisplayItem]) -> None:
        """Replace the options with ``suggestions`` and mirror its selection."""
        self._items = suggestions.items
        self.clear_options()
        self.add_options(
            [
                Option(Text(item.display_label, style=CATEGORY_STYLES.get(item.category, "")))
                for item in suggestions.items
            ]
        )
        self.show_selection(suggestions)

    def show_selection(self, suggestions: SelectionList[DisplayItem]) -> None:
        self.highlighted = suggestions.selected_index

    def item_at(self, index: int) -> DisplayItem:
        return self._items[index]
