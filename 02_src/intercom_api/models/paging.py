"""Paging parameters shared by list endpoints."""

from dataclasses import dataclass
from typing import Any

from .base import Resource


def query_value(value: Any) -> str:
    """Render a query value the way the API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class PageParams:
    """Page cursor for list queries; absent values are not sent."""

    page: int | None = None
    per_page: int | None = None
    total_pages: int | None = None

    def to_query(self) -> dict[str, str]:
        """Return only the paging keys that are set."""
        query = {
            "page": self.page,
            "per_page": self.per_page,
            "total_pages": self.total_pages,
        }
        return {key: query_value(value) for key, value in query.items() if value is not None}


class Pages(Resource):
    """Paging block returned alongside list results."""

    type: str | None = None
    page: int | None = None
    per_page: int | None = None
    total_pages: int | None = None
    next: Any = None
