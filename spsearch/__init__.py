"""spsearch - merged list item and document search over a site's search endpoint."""
from .core.config import DEFAULT_PLACEHOLDER, MIN_QUERY_LENGTH, ROW_LIMIT, SEARCH_FAILED_MESSAGE
from .core.error import InvalidQueryError, SearchApiError, SpSearchError, TransportError
from .models.schema import SearchOutcome, SearchResult, SearchState
from .search import SearchClient, SearchController, file_icon
from .webpart import HostContext, SearchWebPart, WebPartProperties

__all__ = [
    "DEFAULT_PLACEHOLDER",
    "MIN_QUERY_LENGTH",
    "ROW_LIMIT",
    "SEARCH_FAILED_MESSAGE",
    "InvalidQueryError",
    "SearchApiError",
    "SpSearchError",
    "TransportError",
    "SearchOutcome",
    "SearchResult",
    "SearchState",
    "SearchClient",
    "SearchController",
    "file_icon",
    "HostContext",
    "SearchWebPart",
    "WebPartProperties",
]
