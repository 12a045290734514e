import threading
import time
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs, unquote, urlsplit

import pytest
import requests

SITE_URL = "https://contoso.example.com/sites/hr"


def make_row(**cells: Any) -> Dict[str, Any]:
    return {"Cells": [{"Key": k, "Value": v, "ValueType": "Edm.String"} for k, v in cells.items()]}


def make_payload(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"PrimaryQueryResult": {"RelevantResults": {"Table": {"Rows": rows}}}}


def query_params(url: str) -> Dict[str, str]:
    """Decode the query string of a search URL, stripping the single quotes."""
    params = parse_qs(urlsplit(url).query)
    return {k: v[0].strip("'") for k, v in params.items()}


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, invalid_json: bool = False):
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """
    Stands in for an authenticated requests.Session. Responses are routed by
    the category filter present in the query text.
    """

    def __init__(
        self,
        list_response: Optional[FakeResponse] = None,
        doc_response: Optional[FakeResponse] = None,
        *,
        list_delay: float = 0.0,
        doc_delay: float = 0.0,
        list_exc: Optional[Exception] = None,
        doc_exc: Optional[Exception] = None,
    ):
        self.list_response = list_response or FakeResponse(payload=make_payload([]))
        self.doc_response = doc_response or FakeResponse(payload=make_payload([]))
        self.list_delay = list_delay
        self.doc_delay = doc_delay
        self.list_exc = list_exc
        self.doc_exc = doc_exc
        self.calls: List[Dict[str, Any]] = []
        self.completed: List[str] = []
        self._lock = threading.Lock()

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        with self._lock:
            self.calls.append({"url": url, **kwargs})
        is_doc = "IsDocument" in unquote(url)
        time.sleep(self.doc_delay if is_doc else self.list_delay)
        with self._lock:
            self.completed.append("Document" if is_doc else "ListItem")
        exc = self.doc_exc if is_doc else self.list_exc
        if exc is not None:
            raise exc
        return self.doc_response if is_doc else self.list_response


@pytest.fixture
def list_row():
    return make_row(
        Title="Q3 budget report",
        Path="https://contoso.example.com/sites/hr/Lists/Reports/DispForm.aspx?ID=7",
        Description="Quarterly figures",
        Author="Dana Ito",
        Write="2024-03-15T10:20:30.0000000Z",
        SiteTitle="HR",
        ListId="b1c2",
        ListItemId="7",
        SPWebUrl="https://contoso.example.com/sites/hr",
    )


@pytest.fixture
def doc_row():
    return make_row(
        Title="Budget report 2024",
        Path="https://contoso.example.com/sites/hr/Shared Documents/budget.xlsx",
        Author="Sam Okafor",
        Write="2024-04-01T08:00:00Z",
        FileExtension="xlsx",
        Size="1572864",
        SiteName="https://contoso.example.com/sites/hr",
        ParentLink="https://contoso.example.com/sites/hr/Shared Documents",
    )


@pytest.fixture
def session(list_row, doc_row):
    return FakeSession(
        FakeResponse(payload=make_payload([list_row])),
        FakeResponse(payload=make_payload([doc_row])),
    )


@pytest.fixture
def connection_error():
    return requests.ConnectionError("Connection refused")
