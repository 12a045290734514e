from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, TypedDict

Category = Literal["ListItem", "Document"]
Tab = Literal["all", "listItems", "documents"]

LIST_ITEM: Category = "ListItem"
DOCUMENT: Category = "Document"
CATEGORIES: List[Category] = [LIST_ITEM, DOCUMENT]

TAB_CATEGORIES: Dict[str, Optional[Category]] = {
    "all": None,
    "listItems": LIST_ITEM,
    "documents": DOCUMENT,
}


class SearchResult(TypedDict):
    id: str
    title: str
    category: Category
    url: str
    description: str
    file_type: str
    container_name: str
    author: str
    modified_date: str
    size_label: str


class SearchOutcome(TypedDict):
    results: List[SearchResult]
    by_category: Dict[str, List[SearchResult]]
    errors: Dict[str, str]


def normalize_result(
    *,
    id: str,
    title: str,
    category: Category,
    url: Optional[str] = None,
    description: Optional[str] = None,
    file_type: Optional[str] = None,
    container_name: Optional[str] = None,
    author: Optional[str] = None,
    modified_date: Optional[str] = None,
    size_label: Optional[str] = None,
) -> SearchResult:
    return {
        "id": id,
        "title": title,
        "category": category,
        "url": url or "",
        "description": description or "",
        "file_type": file_type or "",
        "container_name": container_name or "",
        "author": author or "",
        "modified_date": modified_date or "",
        "size_label": size_label or "",
    }


def build_outcome(
    *,
    by_category: Dict[str, List[SearchResult]],
    errors: Dict[str, str],
) -> SearchOutcome:
    """Concatenate per-category results in CATEGORIES order."""
    results: List[SearchResult] = []
    for category in CATEGORIES:
        results.extend(by_category.get(category, []))
    return {
        "results": results,
        "by_category": by_category,
        "errors": errors,
    }


@dataclass
class SearchState:
    """Interactive state owned by a SearchController; lives for one mount."""
    query: str = ""
    results: List[SearchResult] = field(default_factory=list)
    is_loading: bool = False
    has_searched: bool = False
    error_message: Optional[str] = None
    active_tab: Tab = "all"
    degraded_categories: List[Category] = field(default_factory=list)
