"""
Host-facing wrapper: what the hosting page supplies and the mount/unmount lifecycle.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from .core.config import DEFAULT_PLACEHOLDER, get_access_token, get_site_url, load_env
from .retrievers.base import HttpClient
from .search.controller import SearchController
from .search.searcher import SearchClient

logger = logging.getLogger(__name__)


@dataclass
class WebPartProperties:
    """Editable configuration, passed straight through to rendering."""
    title: str = ""
    placeholder: str = ""

    @property
    def effective_placeholder(self) -> str:
        return self.placeholder or DEFAULT_PLACEHOLDER


@dataclass
class HostContext:
    """An authenticated HTTP client plus the site it talks to."""
    http_client: HttpClient
    site_url: str

    @classmethod
    def from_env(cls) -> "HostContext":
        """
        Build a context from SPSEARCH_SITE_URL / SPSEARCH_ACCESS_TOKEN.
        """
        load_env()
        site_url = get_site_url()
        if not site_url:
            raise ValueError("SPSEARCH_SITE_URL is not set")
        session = requests.Session()
        token = get_access_token()
        if token:
            session.headers["Authorization"] = f"Bearer {token}"
        else:
            logger.warning("SPSEARCH_ACCESS_TOKEN is not set; requests go out unauthenticated")
        return cls(http_client=session, site_url=site_url)


class SearchWebPart:
    def __init__(
        self,
        context: HostContext,
        properties: Optional[WebPartProperties] = None,
        *,
        debounce_delay: Optional[float] = None,
        partial_results: Optional[bool] = None,
    ) -> None:
        self.context = context
        self.properties = properties or WebPartProperties()
        self._debounce_delay = debounce_delay
        self._partial_results = partial_results
        self.controller: Optional[SearchController] = None

    @property
    def mounted(self) -> bool:
        return self.controller is not None

    def render(self) -> Dict[str, Any]:
        """Mount on first call, then return the current view model."""
        if self.controller is None:
            client = SearchClient(self.context.http_client, self.context.site_url)
            self.controller = SearchController(
                client,
                debounce_delay=self._debounce_delay,
                partial_results=self._partial_results,
            )
            logger.debug(f"Search web part mounted for {self.context.site_url}")

        return {
            "title": self.properties.title,
            "placeholder": self.properties.effective_placeholder,
            **self.controller.view(),
        }

    def dispose(self) -> None:
        if self.controller is None:
            return
        self.controller.close()
        self.controller = None
        logger.debug("Search web part unmounted")
