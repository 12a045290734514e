"""
Debug server using FastAPI for local development and testing.
Run with: uvicorn spsearch.debug_server:app --reload --host 0.0.0.0 --port 50001
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .core.config import MIN_QUERY_LENGTH
from .core.logger import setup_logger
from .models.schema import SearchResult
from .search.searcher import SearchClient
from .webpart import HostContext

logger = logging.getLogger(__name__)

app = FastAPI(
    title="spsearch Debug Server",
    description="Debug interface for list item and document search",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_client: Optional[SearchClient] = None


def get_client() -> SearchClient:
    """
    Lazy initialization of the search client from environment configuration.
    """
    global _client
    if _client is None:
        setup_logger()
        context = HostContext.from_env()
        _client = SearchClient(context.http_client, context.site_url)
    return _client


class SearchRequest(BaseModel):
    """Search request model."""

    query: str = Field(..., description="Free-text query")


class SearchResponse(BaseModel):
    query: str
    returned: int
    by_category: Dict[str, int]
    errors: Dict[str, str]
    results: List[Dict[str, Any]]


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "spsearch Debug Server"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/search", response_model=SearchResponse)
async def search(request: SearchRequest):
    """
    Search list items and documents; per-category failures are reported, not raised.
    """
    query = request.query.strip()
    if len(query) < MIN_QUERY_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Query must be at least {MIN_QUERY_LENGTH} characters",
        )

    try:
        client = get_client()
    except ValueError as exc:
        raise HTTPException(status_code=500, detail=str(exc))

    logger.info(f"Debug search: {query!r}")
    outcome = await client.search_all_with_errors(query)
    results: List[SearchResult] = outcome["results"]
    return {
        "query": query,
        "returned": len(results),
        "by_category": {k: len(v) for k, v in outcome["by_category"].items()},
        "errors": outcome["errors"],
        "results": results,
    }
