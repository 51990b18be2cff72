"""Parsing of the suggestion service's JSON response.

The service answers with result sets keyed by plural names::

    {
        "users": [{"text": "alice"}],
        "threads": [{"text": "Welcome", "payload": {"id": 12, "slug": "welcome"}}],
        "subforums": []
    }
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from searchbox.domain.types import (
    RawSuggestion,
    SuggestionCategory,
    SuggestionPayload,
    category_for_key,
)
from searchbox.logger import get_logger

logger = get_logger("payload")


class EntityRef(BaseModel):
    """Entity reference carried by thread and subforum entries."""

    id: Optional[int | str] = Field(None, description="Entity identifier")
    slug: Optional[str] = Field(None, description="URL slug of the entity")

    model_config = {"extra": "ignore"}


class SuggestionEntry(BaseModel):
    """A single entry of a result set."""

    text: str = Field(..., description="Suggested text")
    payload: Optional[EntityRef] = Field(None, description="Entity reference, absent for authors")

    model_config = {"extra": "ignore"}

    def to_raw(self, category: SuggestionCategory) -> RawSuggestion:
        payload = SuggestionPayload(id=self.payload.id, slug=self.payload.slug) if self.payload else None
        return RawSuggestion(category=category, text=self.text, payload=payload)


def parse_suggestion_response(data: dict[str, Any] | None) -> dict[SuggestionCategory, list[RawSuggestion]]:
    """
    Convert a suggestion service response into categorized results.

    Args:
        data: Decoded JSON body; ``None`` is treated as an empty response

    Returns:
        Mapping from filter category to its suggestions in source order

    Raises:
        UnknownCategory: If a result-set key is not recognised
        pydantic.ValidationError: If an entry is malformed
    """
    results: dict[SuggestionCategory, list[RawSuggestion]] = {}
    for key, entries in (data or {}).items():
        category = category_for_key(key)
        parsed = [SuggestionEntry.model_validate(entry).to_raw(category) for entry in entries or ()]
        results.setdefault(category, []).extend(parsed)

    logger.debug(
        "Parsed suggestion response: "
        + ", ".join(f"{category.value}={len(items)}" for category, items in results.items())
    )
    return results
