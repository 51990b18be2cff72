"""Domain-specific exceptions."""

from typing import Any

__all__ = ["UnknownCategory"]


class UnknownCategory(ValueError):
    """Raised when a suggestion or result key carries a category outside the known set."""

    def __init__(self, category: Any):
        self.category = category
        super().__init__(f"Unknown suggestion category: {category!r}")
