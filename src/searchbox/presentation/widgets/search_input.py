"""
SearchInput - text input that turns navigation keys into search box commands.

Up/down move through the suggestions, tab completes the selected suggestion
into a filter. Enter keeps Input's own submit behaviour.
"""

from textual.binding import Binding
from textual.message import Message
from textual.widgets import Input

from searchbox.core import Direction


class SearchInput(Input):
    """Input field of the search box."""

    BINDINGS = [
        Binding("down", "navigate('next')", "Next suggestion", show=False),
        Binding("up", "navigate('prev')", "Previous suggestion", show=False),
        Binding("tab", "complete", "Complete suggestion", show=False),
    ]

    class Navigate(Message):
        """Request to move the suggestion selection."""

        def __init__(self, direction: Direction) -> None:
            self.direction = direction
            super().__init__()

    class Complete(Message):
        """Request to complete the selected suggestion."""

    def action_navigate(self, direction: str) -> None:
        self.post_message(self.Navigate(Direction(direction)))

    def action_complete(self) -> None:
        self.post_message(self.Complete())
