from typing import Dict

from .base import BaseRetriever, format_date, format_size
from ..core.config import UNTITLED
from ..models.schema import DOCUMENT, SearchResult, normalize_result


def _last_segment(path: str) -> str:
    return path.rsplit("/", 1)[-1] if path else ""


class DocumentRetriever(BaseRetriever):
    """Files stored in document libraries."""

    CATEGORY = DOCUMENT
    QUERY_FILTER = "IsDocument:1"
    FIELDS: Dict[str, str] = {
        "Title": "",
        "Path": "",
        "Author": "",
        "Write": "",
        "FileExtension": "",
        "Size": "",
        "SiteName": "",
        "ParentLink": "",
    }

    def to_result(self, fields: Dict[str, str]) -> SearchResult:
        path = fields["Path"]
        return normalize_result(
            id=f"doc-{path}",
            title=fields["Title"] or _last_segment(path) or UNTITLED,
            category=DOCUMENT,
            url=path,
            file_type=fields["FileExtension"].upper(),
            container_name=fields["SiteName"] or fields["ParentLink"],
            author=fields["Author"],
            modified_date=format_date(fields["Write"]),
            size_label=format_size(fields["Size"]),
        )
