"""
Search execution module: parallel category searching.
"""
import asyncio
import logging
from typing import Dict, List, Optional, Tuple

from ..core.config import ROW_LIMIT
from ..retrievers.base import HttpClient, Retriever
from ..retrievers.documents import DocumentRetriever
from ..retrievers.listitems import ListItemRetriever
from ..models.schema import SearchOutcome, SearchResult, build_outcome

logger = logging.getLogger(__name__)


class SearchClient:
    """
    Issues the list-item and document searches against one site.

    Retrievers are synchronous (requests); each call runs in the default
    executor so the two categories are dispatched concurrently.

    search_list_items, search_documents and search_all raise
    InvalidQueryError for an empty or whitespace-only query without issuing
    a request; search_all_with_errors reports it under each category.
    """

    def __init__(
        self,
        http_client: HttpClient,
        site_url: str,
        *,
        timeout: Optional[float] = None,
        row_limit: int = ROW_LIMIT,
    ) -> None:
        self.site_url = (site_url or "").rstrip("/")
        self.list_items = ListItemRetriever(http_client, self.site_url, timeout=timeout, row_limit=row_limit)
        self.documents = DocumentRetriever(http_client, self.site_url, timeout=timeout, row_limit=row_limit)

    @property
    def retrievers(self) -> List[Retriever]:
        # concatenation order of search_all
        return [self.list_items, self.documents]

    # Both executor threads issue GETs on the one host session; concurrent
    # read-only requests on a shared requests.Session are accepted here.
    @staticmethod
    async def _fetch(retriever: Retriever, query: str) -> List[SearchResult]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, retriever.fetch, query)

    async def search_list_items(self, query: str) -> List[SearchResult]:
        return await self._fetch(self.list_items, query)

    async def search_documents(self, query: str) -> List[SearchResult]:
        return await self._fetch(self.documents, query)

    async def search_all(self, query: str) -> List[SearchResult]:
        """
        Run both category searches concurrently and concatenate list items
        before documents. Any category failure fails the whole call.
        """
        list_items, documents = await asyncio.gather(
            self.search_list_items(query),
            self.search_documents(query),
        )
        return [*list_items, *documents]

    async def _search_single(
        self,
        retriever: Retriever,
        query: str,
    ) -> Tuple[str, List[SearchResult], Optional[Exception]]:
        """
        Search a single category, capturing the failure instead of raising.

        Returns:
            Tuple of (category, results, error)
        """
        try:
            results = await self._fetch(retriever, query)
            return retriever.category, results, None
        except Exception as e:
            logger.error(f"Error searching {retriever.category}: {e}")
            return retriever.category, [], e

    async def search_all_with_errors(self, query: str) -> SearchOutcome:
        """
        Search both categories concurrently and report each category's outcome.

        Returns:
            SearchOutcome with
            - results: list items then documents, from the categories that succeeded
            - by_category: category -> results (empty for a failed category)
            - errors: category -> error message (only for failed categories)
        """
        gathered = await asyncio.gather(
            *(self._search_single(retriever, query) for retriever in self.retrievers)
        )

        by_category: Dict[str, List[SearchResult]] = {}
        errors: Dict[str, str] = {}
        for category, results, error in gathered:
            by_category[category] = results
            if error is not None:
                errors[category] = str(error)

        return build_outcome(by_category=by_category, errors=errors)
