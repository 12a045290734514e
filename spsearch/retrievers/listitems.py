from typing import Dict

from .base import BaseRetriever, format_date
from ..core.config import UNTITLED
from ..models.schema import LIST_ITEM, SearchResult, normalize_result


class ListItemRetriever(BaseRetriever):
    """Structured list records; document libraries are excluded by the content class."""

    CATEGORY = LIST_ITEM
    QUERY_FILTER = "ContentClass:STS_ListItem"
    FIELDS: Dict[str, str] = {
        "Title": "",
        "Path": "",
        "Description": "",
        "Author": "",
        "Write": "",
        "SiteTitle": "",
        "ListId": "",
        "ListItemId": "",
        "SPWebUrl": "",
    }

    def to_result(self, fields: Dict[str, str]) -> SearchResult:
        return normalize_result(
            id=f"list-{fields['ListItemId']}-{fields['ListId']}",
            title=fields["Title"] or UNTITLED,
            category=LIST_ITEM,
            url=fields["Path"],
            description=fields["Description"],
            container_name=fields["SiteTitle"],
            author=fields["Author"],
            modified_date=format_date(fields["Write"]),
        )
