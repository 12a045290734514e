"""
Error taxonomy for search requests.
"""
import logging
from enum import Enum
from typing import Any, Dict, Optional

import requests


class ErrorType(Enum):
    """Error classification types."""
    TRANSPORT = "transport"
    API_STATUS = "api_status"
    INVALID_QUERY = "invalid_query"
    UNKNOWN = "unknown"


class SpSearchError(Exception):
    """Base exception for search errors; details carry category / status_code when known."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.UNKNOWN, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.details = details or {}


class TransportError(SpSearchError):
    """The HTTP call itself failed (network, timeout, undecodable body)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_type=ErrorType.TRANSPORT, details=details)


class SearchApiError(SpSearchError):
    """The search endpoint answered with a non-success HTTP status."""

    def __init__(self, status_code: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"Search API returned {status_code}",
            error_type=ErrorType.API_STATUS,
            details={"status_code": status_code, **(details or {})},
        )
        self.status_code = status_code


class InvalidQueryError(SpSearchError):
    def __init__(self, message: str = "Query must not be empty"):
        super().__init__(message, error_type=ErrorType.INVALID_QUERY)


def classify_error(error: Exception) -> ErrorType:
    if isinstance(error, SpSearchError):
        return error.error_type
    if isinstance(error, requests.RequestException):
        return ErrorType.TRANSPORT
    return ErrorType.UNKNOWN


def log_error(
    error: Exception,
    logger: Optional[logging.Logger] = None,
    context: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Log a failed search with its category and HTTP status, and return what was logged.

    Args:
        error: Exception instance
        logger: Logger instance (defaults to "spsearch")
        context: Extra fields such as the query and dispatch token

    Returns:
        Dictionary with error_type, error_class, message, category, status_code, context
    """
    if logger is None:
        logger = logging.getLogger("spsearch")

    error_type = classify_error(error)
    details = error.details if isinstance(error, SpSearchError) else {}
    error_info = {
        "error_type": error_type.value,
        "error_class": type(error).__name__,
        "message": str(error),
        "category": details.get("category"),
        "status_code": details.get("status_code"),
        "context": context or {},
    }

    where = error_info["category"] or "search"
    status = f" (HTTP {error_info['status_code']})" if error_info["status_code"] is not None else ""
    logger.error(
        f"[{error_type.value}] {where} failed{status}: {error}",
        exc_info=logger.isEnabledFor(logging.DEBUG),
        extra={"error_info": error_info},
    )
    return error_info
