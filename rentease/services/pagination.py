"""
Pagination helpers for list endpoints that return the paginated envelope
"""
import math
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

from rentease.services.result import to_jsonable

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    data: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 0
    total_pages: int = 1

    def to_envelope(self) -> dict:
        return {
            "data": to_jsonable(self.data),
            "total": self.total,
            "page": self.page,
            "pageSize": self.page_size,
            "totalPages": self.total_pages,
        }


def paginate(items: List[Any], page: int = 1, page_size: Optional[int] = None, max_page_size: int = 100) -> Page:
    """
    Slice ``items`` into one page.

    Without a page size the whole result is returned as a single page.
    """
    total = len(items)
    if not page_size:
        return Page(data=list(items), total=total, page=1, page_size=total, total_pages=1)

    page_size = max(1, min(page_size, max_page_size))
    page = max(1, page)
    start = (page - 1) * page_size
    end = start + page_size
    return Page(
        data=list(items[start:end]),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size) if total else 0,
    )
