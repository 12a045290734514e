"""
Retrievers module: category-specific search request and row decoding.
"""
from .base import (
    BaseRetriever,
    HttpClient,
    Retriever,
    decode_row,
    extract_rows,
    format_date,
    format_size,
)
from .documents import DocumentRetriever
from .listitems import ListItemRetriever

__all__ = [
    "BaseRetriever",
    "HttpClient",
    "Retriever",
    "DocumentRetriever",
    "ListItemRetriever",
    "decode_row",
    "extract_rows",
    "format_date",
    "format_size",
]
