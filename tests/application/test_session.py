"""Tests for SearchSession command handling."""

import asyncio

import pytest
from loguru import logger

from searchbox.application.query_state import QueryState
from searchbox.application.session import SearchSession
from searchbox.config import SearchBoxConfig
from searchbox.core import Direction
from searchbox.domain.exceptions import UnknownCategory
from searchbox.domain.types import (
    DisplayItem,
    RawSuggestion,
    RouteKind,
    RouteRequest,
    SearchRequest,
    SuggestionCategory,
    SuggestionPayload,
)


class StubProvider:
    def __init__(self, responses=None, error: Exception | None = None):
        self._responses = responses or {}
        self._error = error
        self.requests: list[str] = []

    async def fetch(self, text: str):
        self.requests.append(text)
        if self._error is not None:
            raise self._error
        return self._responses.get(text, {})


class RecordingNavigator:
    def __init__(self):
        self.routes: list[RouteRequest] = []

    def navigate(self, route: RouteRequest) -> None:
        self.routes.append(route)


class RecordingDispatcher:
    def __init__(self):
        self.searches: list[tuple[SearchRequest, str]] = []

    def search(self, request: SearchRequest, url: str) -> None:
        self.searches.append((request, url))


RESPONSES = {
    "a": {
        "users": [RawSuggestion(SuggestionCategory.AUTHOR, "alice")],
        "threads": [
            RawSuggestion(SuggestionCategory.THREAD, "About", SuggestionPayload(id=7, slug="about")),
        ],
    },
}


def make_session(provider=None, config=None) -> tuple[SearchSession, RecordingNavigator, RecordingDispatcher]:
    navigator = RecordingNavigator()
    dispatcher = RecordingDispatcher()
    session = SearchSession(provider or StubProvider(RESPONSES), navigator, dispatcher, config)
    return session, navigator, dispatcher


def labels(session: SearchSession) -> list[str]:
    return [item.display_label for item in session.suggestions.items]


@pytest.mark.asyncio
async def test_initial_suggestions_hold_empty_search() -> None:
    session, _, _ = make_session()
    assert labels(session) == ["Search for "]
    assert session.selected is None


@pytest.mark.asyncio
async def test_change_text_fetches_and_composes() -> None:
    session, _, _ = make_session()
    seen = []
    session.on_suggestions = seen.append

    task = session.change_text("a")
    assert labels(session) == ["Search for a"]

    applied = await task

    assert applied is True
    assert labels(session) == ["Posts by: alice", "Thread: About", "Search for a"]
    assert len(seen) == 2


@pytest.mark.asyncio
async def test_unchanged_text_does_not_refetch() -> None:
    provider = StubProvider(RESPONSES)
    session, _, _ = make_session(provider)

    await session.change_text("a")
    assert session.change_text("a") is None
    assert provider.requests == ["a"]


@pytest.mark.asyncio
async def test_stale_response_is_discarded() -> None:
    session, _, _ = make_session()
    session.state = QueryState(text="ab")

    applied = session.receive_suggestions("a", RESPONSES["a"])

    assert applied is False
    assert labels(session) == ["Search for "]


@pytest.mark.asyncio
async def test_fetch_failure_degrades_to_search_item() -> None:
    session, _, _ = make_session(StubProvider(error=ConnectionError("offline")))

    applied = await session.change_text("a")

    assert applied is True
    assert labels(session) == ["Search for a"]


@pytest.mark.asyncio
async def test_complete_author_then_refines() -> None:
    session, _, _ = make_session()
    await session.change_text("a")

    session.select(Direction.NEXT)
    state = session.complete()

    assert state.text == ""
    assert state.filter_value(SuggestionCategory.AUTHOR) == "alice"
    assert labels(session) == ["Search for "]
    await session.fetch_task


@pytest.mark.asyncio
async def test_complete_without_selection_keeps_state() -> None:
    session, _, _ = make_session()
    await session.change_text("a")
    before = session.state

    assert session.complete() is before


@pytest.mark.asyncio
async def test_submit_plain_search_dispatches_once() -> None:
    session, navigator, dispatcher = make_session(config=SearchBoxConfig(search_path="/forum/search"))
    await session.change_text("a")

    session.select(Direction.PREV)
    action = session.submit()

    assert action == SearchRequest(text="a")
    assert dispatcher.searches == [(SearchRequest(text="a"), "/forum/search?text=a")]
    assert navigator.routes == []
    assert session.text == ""
    await session.fetch_task


@pytest.mark.asyncio
async def test_submit_thread_navigates_once() -> None:
    session, navigator, dispatcher = make_session()
    await session.change_text("a")

    session.select(Direction.NEXT)
    session.select(Direction.NEXT)
    action = session.submit()

    assert action == RouteRequest(kind=RouteKind.THREAD, entity_id=7, entity_slug="about")
    assert navigator.routes == [action]
    assert dispatcher.searches == []
    assert session.text == "a"


@pytest.mark.asyncio
async def test_submit_without_selection_emits_nothing() -> None:
    session, navigator, dispatcher = make_session()
    await session.change_text("a")

    assert session.submit() is None
    assert navigator.routes == []
    assert dispatcher.searches == []


@pytest.mark.asyncio
async def test_submit_unknown_category_emits_nothing() -> None:
    session, navigator, dispatcher = make_session()
    bogus = DisplayItem(category="tag", text="x", display_label="Tag: x")  # type: ignore[arg-type]

    with pytest.raises(UnknownCategory):
        session.submit_item(bogus)

    assert navigator.routes == []
    assert dispatcher.searches == []


@pytest.mark.asyncio
async def test_accumulated_filters_reach_search_url() -> None:
    responses = {
        "b": {"users": [RawSuggestion(SuggestionCategory.AUTHOR, "bob")]},
        "py": {"subforums": [RawSuggestion(SuggestionCategory.SUBFORUM, "python", SuggestionPayload(2, "python"))]},
    }
    session, _, dispatcher = make_session(StubProvider(responses))

    await session.change_text("b")
    session.select(Direction.NEXT)
    session.complete()
    await session.fetch_task

    await session.change_text("py")
    session.select(Direction.PREV)
    session.submit()

    request, url = dispatcher.searches[0]
    assert request == SearchRequest(text="py", filter_params=(("author", "bob"),))
    assert url == "/search?text=py&author=bob"
    await session.fetch_task


@pytest.mark.asyncio
async def test_unknown_result_set_degrades_and_is_logged() -> None:
    provider = StubProvider({"a": {"tags": [RawSuggestion(SuggestionCategory.AUTHOR, "python")]}})
    session, _, _ = make_session(provider)
    errors: list[str] = []
    sink_id = logger.add(lambda message: errors.append(str(message)), level="ERROR")
    try:
        task = session.change_text("a")
        applied = await task
    finally:
        logger.remove(sink_id)

    assert applied is True
    assert task.exception() is None
    assert labels(session) == ["Search for a"]
    assert any("unknown result set" in message for message in errors)


@pytest.mark.asyncio
async def test_in_flight_fetches_are_tracked_until_done() -> None:
    session, _, _ = make_session()

    first = session.change_text("a")
    second = session.change_text("ab")
    assert session.pending_fetches == {first, second}

    assert await first is False
    assert await second is True
    await asyncio.sleep(0)
    assert session.pending_fetches == frozenset()


class TestWithoutEventLoop:
    """Synchronous commands work when no event loop is running."""

    def test_change_text_updates_state_without_fetching(self):
        provider = StubProvider(RESPONSES)
        session, _, _ = make_session(provider)

        assert session.change_text("a") is None
        assert session.text == "a"
        assert labels(session) == ["Search for a"]
        assert provider.requests == []

    def test_complete_applies_filter(self):
        session, _, _ = make_session()
        session.change_text("a")
        session.receive_suggestions("a", RESPONSES["a"])
        session.select(Direction.NEXT)

        state = session.complete()

        assert state.text == ""
        assert state.filter_value(SuggestionCategory.AUTHOR) == "alice"
        assert labels(session) == ["Search for "]
        assert session.fetch_task is None

    def test_submit_dispatches_once(self):
        session, navigator, dispatcher = make_session()
        session.change_text("a")
        session.select(Direction.PREV)

        action = session.submit()

        assert action == SearchRequest(text="a")
        assert dispatcher.searches == [(SearchRequest(text="a"), "/search?text=a")]
        assert navigator.routes == []
        assert session.text == ""
