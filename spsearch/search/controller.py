"""
Interactive search control: debounced input, explicit triggers, tab filtering.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional, Set

from ..core.config import MIN_QUERY_LENGTH, SEARCH_FAILED_MESSAGE, get_debounce_delay, get_partial_results
from ..core.error import SpSearchError, log_error
from ..models.schema import (
    CATEGORIES,
    DOCUMENT,
    LIST_ITEM,
    TAB_CATEGORIES,
    Category,
    SearchResult,
    SearchState,
    Tab,
)
from .searcher import SearchClient

logger = logging.getLogger(__name__)

TAB_LABELS: Dict[str, str] = {
    "all": "All",
    "listItems": "List Items",
    "documents": "Documents",
}

FILE_ICONS: Dict[str, str] = {
    "DOCX": "📄", "DOC": "📄",
    "XLSX": "📊", "XLS": "📊",
    "PPTX": "📑", "PPT": "📑",
    "PDF": "📕",
    "PNG": "🖼️", "JPG": "🖼️", "JPEG": "🖼️", "GIF": "🖼️",
    "ZIP": "📦", "MSG": "✉️",
    "TXT": "📝",
}
DEFAULT_FILE_ICON = "📁"


def file_icon(file_type: Optional[str]) -> str:
    return FILE_ICONS.get((file_type or "").upper(), DEFAULT_FILE_ICON)


def _is_searchable(query: Optional[str]) -> bool:
    return bool(query) and len(query.strip()) >= MIN_QUERY_LENGTH


class SearchController:
    """
    Owns the SearchState of one mounted search box.

    Input handlers are synchronous and must be called from the running event
    loop. Every dispatched search takes a new token; a completion only lands
    if its token is still the latest, so slow stale responses are dropped.
    Clearing or shortening the query also advances the token.
    """

    def __init__(
        self,
        client: SearchClient,
        *,
        debounce_delay: Optional[float] = None,
        partial_results: Optional[bool] = None,
    ) -> None:
        self.client = client
        self.debounce_delay = get_debounce_delay() if debounce_delay is None else debounce_delay
        self.partial_results = get_partial_results() if partial_results is None else partial_results
        self.state = SearchState()
        self._pending: Optional[asyncio.TimerHandle] = None
        self._token = 0
        self._inflight: Set[asyncio.Task] = set()

    # --- Scheduling ---

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _supersede(self) -> None:
        """Cancel the scheduled search and orphan any in-flight one."""
        self._cancel_pending()
        self._token += 1

    def _fire(self, query: str) -> None:
        self._pending = None
        self._start(query)

    def _start(self, query: str) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(self.execute_search(query))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        return task

    async def wait_idle(self) -> None:
        """Wait for every dispatched search to settle."""
        while self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)

    # --- Input handlers ---

    def on_input_change(self, text: str) -> None:
        self.state.query = text
        self._cancel_pending()

        if _is_searchable(text):
            loop = asyncio.get_running_loop()
            self._pending = loop.call_later(self.debounce_delay, self._fire, text)
            return

        self._supersede()
        self.state.results = []
        self.state.has_searched = False
        self.state.is_loading = False
        self.state.error_message = None
        self.state.degraded_categories = []

    def on_key_down(self, key: str) -> Optional[asyncio.Task]:
        if key == "Enter":
            return self.on_search_click()
        if key == "Escape":
            self.clear()
        return None

    def on_search_click(self) -> Optional[asyncio.Task]:
        """Dispatch immediately, bypassing the debounce delay."""
        self._cancel_pending()
        if not _is_searchable(self.state.query):
            return None
        return self._start(self.state.query)

    def clear(self) -> None:
        self._supersede()
        self.state.query = ""
        self.state.results = []
        self.state.has_searched = False
        self.state.is_loading = False
        self.state.error_message = None
        self.state.degraded_categories = []

    def set_active_tab(self, tab: Tab) -> None:
        if tab not in TAB_CATEGORIES:
            raise ValueError(f"Unknown tab: {tab}")
        self.state.active_tab = tab

    def close(self) -> None:
        """Release scheduled and in-flight work on unmount."""
        self._supersede()
        for task in list(self._inflight):
            task.cancel()

    # --- Search ---

    async def execute_search(self, query: str) -> None:
        if not _is_searchable(query):
            return

        self._token += 1
        token = self._token
        query = query.strip()

        self.state.is_loading = True
        self.state.error_message = None
        self.state.has_searched = True
        self.state.degraded_categories = []
        logger.info(f"Searching for {query!r} (token {token})")

        try:
            if self.partial_results:
                outcome = await self.client.search_all_with_errors(query)
                if len(outcome["errors"]) == len(CATEGORIES):
                    raise SpSearchError("All categories failed", details={"errors": outcome["errors"]})
                results = outcome["results"]
                degraded = [c for c in CATEGORIES if c in outcome["errors"]]
            else:
                results = await self.client.search_all(query)
                degraded = []
        except Exception as exc:
            if token != self._token:
                logger.debug(f"Discarding stale failure for {query!r} (token {token})")
                return
            log_error(exc, logger, context={"query": query, "token": token})
            self.state.is_loading = False
            self.state.error_message = SEARCH_FAILED_MESSAGE
            self.state.results = []
            return

        if token != self._token:
            logger.debug(f"Discarding stale results for {query!r} (token {token})")
            return

        if degraded:
            logger.warning(f"Partial results for {query!r}: {', '.join(degraded)} unavailable")
        self.state.results = results
        self.state.degraded_categories = degraded
        self.state.is_loading = False

    # --- Derived views ---

    def filtered_results(self) -> List[SearchResult]:
        category = TAB_CATEGORIES.get(self.state.active_tab)
        if category is None:
            return list(self.state.results)
        return [r for r in self.state.results if r["category"] == category]

    def count_by_category(self, category: Category) -> int:
        return sum(1 for r in self.state.results if r["category"] == category)

    def tab_counts(self) -> Dict[str, int]:
        return {
            "all": len(self.state.results),
            "listItems": self.count_by_category(LIST_ITEM),
            "documents": self.count_by_category(DOCUMENT),
        }

    def panel(self) -> str:
        if self.state.is_loading:
            return "loading"
        if self.state.error_message:
            return "error"
        if not self.state.has_searched:
            return "idle"
        if not self.filtered_results():
            return "empty"
        return "results"

    def view(self) -> Dict[str, Any]:
        """
        View model for the rendering layer.

        Tabs are only offered once a search has produced results; the search
        action is disabled while loading or when the query is blank.
        """
        counts = self.tab_counts()
        show_tabs = self.state.has_searched and bool(self.state.results)
        return {
            "query": self.state.query,
            "panel": self.panel(),
            "error_message": self.state.error_message,
            "search_enabled": not self.state.is_loading and bool(self.state.query.strip()),
            "show_clear": bool(self.state.query),
            "tabs": [
                {
                    "key": key,
                    "label": TAB_LABELS[key],
                    "count": counts[key],
                    "active": key == self.state.active_tab,
                }
                for key in TAB_CATEGORIES
            ] if show_tabs else [],
            "results": [
                {**r, "icon": file_icon(r["file_type"]) if r["category"] == DOCUMENT else None}
                for r in self.filtered_results()
            ],
            "degraded_categories": list(self.state.degraded_categories),
        }
