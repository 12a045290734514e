"""Core module: configuration, logging, and error handling."""
from .config import (
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_PLACEHOLDER,
    MIN_QUERY_LENGTH,
    ROW_LIMIT,
    SEARCH_ENDPOINT,
    SEARCH_FAILED_MESSAGE,
    UNTITLED,
    get_access_token,
    get_debounce_delay,
    get_http_timeout,
    get_log_file,
    get_log_level,
    get_partial_results,
    get_site_url,
    load_env,
)
from .error import (
    ErrorType,
    InvalidQueryError,
    SearchApiError,
    SpSearchError,
    TransportError,
    classify_error,
    log_error,
)
from .logger import setup_logger

__all__ = [
    # Config
    "DEFAULT_DEBOUNCE_MS",
    "DEFAULT_PLACEHOLDER",
    "MIN_QUERY_LENGTH",
    "ROW_LIMIT",
    "SEARCH_ENDPOINT",
    "SEARCH_FAILED_MESSAGE",
    "UNTITLED",
    "get_access_token",
    "get_debounce_delay",
    "get_http_timeout",
    "get_log_file",
    "get_log_level",
    "get_partial_results",
    "get_site_url",
    "load_env",
    # Error handling
    "ErrorType",
    "InvalidQueryError",
    "SearchApiError",
    "SpSearchError",
    "TransportError",
    "classify_error",
    "log_error",
    # Logging
    "setup_logger",
]
