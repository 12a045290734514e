"""Search module: category fan-out and interactive search control."""
from .controller import SearchController, file_icon
from .searcher import SearchClient

__all__ = [
    "SearchClient",
    "SearchController",
    "file_icon",
]
