"""Models module: data schemas and types."""
from .schema import (
    CATEGORIES,
    DOCUMENT,
    LIST_ITEM,
    TAB_CATEGORIES,
    Category,
    SearchOutcome,
    SearchResult,
    SearchState,
    Tab,
    build_outcome,
    normalize_result,
)

__all__ = [
    "CATEGORIES",
    "DOCUMENT",
    "LIST_ITEM",
    "TAB_CATEGORIES",
    "Category",
    "SearchOutcome",
    "SearchResult",
    "SearchState",
    "Tab",
    "build_outcome",
    "normalize_result",
]
