"""Outbound actions produced when a suggestion is submitted."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

__all__ = ["RouteKind", "RouteRequest", "SearchRequest"]


class RouteKind(Enum):
    """Pages a suggestion can navigate to directly."""

    THREAD = "thread"
    SUBFORUM = "subforum"


@dataclass(frozen=True, slots=True)
class RouteRequest:
    """Direct navigation to a thread or subforum page."""

    kind: RouteKind
    entity_id: Optional[int | str]
    entity_slug: Optional[str]


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Filtered text search.

    ``filter_params`` holds ``(name, value)`` pairs in filter category
    declaration order.
    """

    text: str
    filter_params: tuple[tuple[str, str], ...] = field(default_factory=tuple)
