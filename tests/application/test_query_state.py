"""Unit tests for query state and filter completion."""

import pytest

from searchbox.application.composer import to_display_item
from searchbox.application.query_state import QueryState, complete_with, filter_params, update_text
from searchbox.domain.exceptions import UnknownCategory
from searchbox.domain.types import SuggestionCategory


def test_initial_state_has_every_filter_unset() -> None:
    state = QueryState.initial()

    assert state.text == ""
    assert dict(state.filters) == {
        SuggestionCategory.AUTHOR: None,
        SuggestionCategory.THREAD: None,
        SuggestionCategory.SUBFORUM: None,
    }


def test_update_text_keeps_filters() -> None:
    state = QueryState(filters={SuggestionCategory.AUTHOR: "bob"})

    updated = update_text(state, "rust")

    assert updated.text == "rust"
    assert updated.filter_value(SuggestionCategory.AUTHOR) == "bob"


def test_complete_with_search_item_is_noop() -> None:
    state = QueryState(text="rust")
    assert complete_with(state, to_display_item(SuggestionCategory.NONE, "rust")) is state


def test_complete_with_nothing_is_noop() -> None:
    state = QueryState(text="rust")
    assert complete_with(state, None) is state


def test_complete_with_author_promotes_text_to_filter() -> None:
    state = QueryState(text="bo")

    completed = complete_with(state, to_display_item(SuggestionCategory.AUTHOR, "bob"))

    assert completed.text == ""
    assert completed.filter_value(SuggestionCategory.AUTHOR) == "bob"


def test_filters_accumulate_across_categories() -> None:
    state = complete_with(QueryState(text="b"), to_display_item(SuggestionCategory.AUTHOR, "bob"))
    state = complete_with(update_text(state, "t"), to_display_item(SuggestionCategory.THREAD, "t1"))

    assert state.filter_value(SuggestionCategory.AUTHOR) == "bob"
    assert state.filter_value(SuggestionCategory.THREAD) == "t1"
    assert state.filter_value(SuggestionCategory.SUBFORUM) is None


def test_same_category_replaces_previous_filter() -> None:
    state = complete_with(QueryState(), to_display_item(SuggestionCategory.AUTHOR, "bob"))
    state = complete_with(state, to_display_item(SuggestionCategory.AUTHOR, "carol"))
    assert state.filter_value(SuggestionCategory.AUTHOR) == "carol"


def test_filters_are_read_only() -> None:
    state = QueryState()
    with pytest.raises(TypeError):
        state.filters[SuggestionCategory.AUTHOR] = "mallory"  # type: ignore[index]


def test_none_category_filter_rejected() -> None:
    with pytest.raises(UnknownCategory):
        QueryState(filters={SuggestionCategory.NONE: "x"})


def test_filter_params_in_declaration_order() -> None:
    state = QueryState(
        filters={
            SuggestionCategory.SUBFORUM: "general",
            SuggestionCategory.AUTHOR: "bob",
            SuggestionCategory.THREAD: None,
        }
    )
    assert filter_params(state) == (("author", "bob"), ("subforum", "general"))


def test_filter_params_skip_empty_values() -> None:
    state = QueryState(filters={SuggestionCategory.AUTHOR: ""})
    assert filter_params(state) == ()


def test_states_compare_by_value() -> None:
    assert QueryState(text="a") == QueryState(text="a", filters={SuggestionCategory.AUTHOR: None})
    assert hash(QueryState(text="a")) == hash(QueryState(text="a"))
