"""
Base retriever classes and protocol definitions.
"""
import logging
import math
import re
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol
from urllib.parse import quote

import requests

from ..core.config import ROW_LIMIT, SEARCH_ENDPOINT, get_http_timeout
from ..core.error import InvalidQueryError, SearchApiError, TransportError
from ..models.schema import Category, SearchResult

logger = logging.getLogger(__name__)

REQUEST_HEADERS = {
    "Accept": "application/json;odata=nometadata",
    "odata-version": "",
}

MIB = 1024 * 1024

_FRACTION_RE = re.compile(r"\.(\d+)")


class HttpClient(Protocol):
    """
    What the host supplies: an already-authenticated client (requests.Session fits).
    """
    def get(self, url: str, **kwargs: Any) -> requests.Response:
        ...


class Retriever(Protocol):
    """
    Protocol defining the interface for category retrievers.
    """
    category: Category

    def fetch(self, query: str) -> List[SearchResult]:
        ...


def encode_component(value: str) -> str:
    """Percent-encode like a browser's encodeURIComponent."""
    return quote(value, safe="!~*'()")


def extract_rows(payload: Any) -> List[Dict[str, Any]]:
    """
    Walk PrimaryQueryResult.RelevantResults.Table.Rows; any missing segment means no rows.
    """
    node = payload
    for key in ("PrimaryQueryResult", "RelevantResults", "Table", "Rows"):
        if not isinstance(node, dict):
            return []
        node = node.get(key)
    if not isinstance(node, list):
        return []
    return node


def decode_row(row: Dict[str, Any], fields: Dict[str, str]) -> Dict[str, str]:
    """
    Index a row's cells once and return exactly the declared fields.

    Args:
        row: One row object from the search response ({"Cells": [{"Key", "Value"}, ...]})
        fields: Mapping of cell key -> default used when the cell is absent or null

    Returns:
        Dict with one string value per declared field
    """
    cells = (row.get("Cells") or []) if isinstance(row, dict) else []
    values: Dict[str, Any] = {}
    for cell in cells:
        if not isinstance(cell, dict):
            continue
        key = cell.get("Key")
        # first occurrence wins, same as a linear find
        if key in fields and key not in values:
            values[key] = cell.get("Value")

    decoded: Dict[str, str] = {}
    for key, default in fields.items():
        value = values.get(key)
        decoded[key] = default if value is None or value == "" else str(value)
    return decoded


def format_size(value: Any) -> str:
    """
    Human-readable size: "<n> KB" below 1 MiB (rounded up), "<n.n> MB" from 1 MiB.
    Zero, missing or non-numeric sizes give "".
    """
    size = BaseRetriever._coerce_int(value)
    if not size or size <= 0:
        return ""
    if size >= MIB:
        return f"{size / MIB:.1f} MB"
    return f"{math.ceil(size / 1024)} KB"


def format_date(value: Optional[str]) -> str:
    """
    Parse an ISO-8601 timestamp and render the locale's short date ("%x").
    Aware timestamps are converted to local time first. Unparseable values give "".
    """
    if not value:
        return ""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    # fromisoformat wants exactly microseconds
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparseable date value: {value!r}")
        return ""
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime("%x")


class BaseRetriever:
    """
    Base class for category retrievers: builds the query URL, issues the request
    and decodes rows. Subclasses declare CATEGORY, QUERY_FILTER and FIELDS and
    implement to_result().
    """

    CATEGORY: Category
    QUERY_FILTER: str = ""
    FIELDS: Dict[str, str] = {}

    def __init__(
        self,
        http_client: HttpClient,
        site_url: str,
        *,
        timeout: Optional[float] = None,
        row_limit: int = ROW_LIMIT,
    ) -> None:
        self.http_client = http_client
        self.site_url = (site_url or "").rstrip("/")
        self.timeout = timeout if timeout is not None else get_http_timeout()
        self.row_limit = row_limit

    @property
    def category(self) -> Category:
        return self.CATEGORY

    @staticmethod
    def _coerce_int(value: Any) -> Optional[int]:
        """
        Best-effort coercion to int.
        """
        if value is None:
            return None
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if math.isfinite(value) else None
        if isinstance(value, str):
            s = value.strip()
            if not s:
                return None
            if s.lower() in {"n/a", "na", "none", "null"}:
                return None
            try:
                return int(float(s))
            except (ValueError, OverflowError):
                # "inf", "1e400" and friends
                return None
        return None

    def build_url(self, query: str) -> str:
        querytext = encode_component(f"{query} {self.QUERY_FILTER}")
        select_properties = encode_component(",".join(self.FIELDS))
        return (
            f"{self.site_url}{SEARCH_ENDPOINT}"
            f"?querytext='{querytext}'"
            f"&selectproperties='{select_properties}'"
            f"&rowlimit={self.row_limit}"
            f"&trimduplicates=false"
        )

    def request(self, query: str) -> Any:
        """
        Issue the GET and return the decoded JSON body.

        Raises:
            TransportError: network failure or undecodable body
            SearchApiError: non-2xx status
        """
        url = self.build_url(query)
        try:
            response = self.http_client.get(url, headers=dict(REQUEST_HEADERS), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error(f"Error searching {self.CATEGORY}: {exc}")
            raise TransportError(
                f"{self.CATEGORY} search request failed: {exc}",
                details={"category": self.CATEGORY},
            ) from exc

        if not 200 <= response.status_code < 300:
            logger.error(f"Error searching {self.CATEGORY}: HTTP {response.status_code}")
            raise SearchApiError(response.status_code, details={"category": self.CATEGORY})

        try:
            return response.json()
        except ValueError as exc:
            logger.error(f"Error searching {self.CATEGORY}: invalid JSON body: {exc}")
            raise TransportError(
                f"{self.CATEGORY} search returned an invalid body",
                details={"category": self.CATEGORY},
            ) from exc

    def fetch(self, query: str) -> List[SearchResult]:
        if not query or not query.strip():
            raise InvalidQueryError()

        payload = self.request(query)
        rows = extract_rows(payload)
        logger.debug(f"{self.CATEGORY} search for {query!r} returned {len(rows)} rows")
        return [self.to_result(decode_row(row, self.FIELDS)) for row in rows]

    def to_result(self, fields: Dict[str, str]) -> SearchResult:
        raise NotImplementedError
