"""Domain protocols - interfaces for the services around the search box.

Using protocols lets the session be driven by real network/navigation
services in the application and by simple stubs in tests.
"""

from searchbox.domain.protocols.services import (
    CategorizedResults,
    Navigator,
    SearchDispatcher,
    SuggestionProvider,
)

__all__ = [
    "CategorizedResults",
    "SuggestionProvider",
    "Navigator",
    "SearchDispatcher",
]
