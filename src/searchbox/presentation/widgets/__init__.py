"""Textual widgets for the search box."""

from .search_box import SearchBox, should_show_suggestions
from .search_input import SearchInput
from .suggestion_list import SuggestionList

__all__ = ["SearchBox", "SearchInput", "SuggestionList", "should_show_suggestions"]
