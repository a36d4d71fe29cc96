from __future__ import annotations

import json
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy.orm import Query

T = TypeVar("T")

PAGINATION_HEADER = "X-Pagination"


@dataclass(frozen=True)
class Page(Generic[T]):
    items: tuple[T, ...]
    total_count: int
    current_page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


def _offset(page_number: int, page_size: int) -> int:
    return (page_number - 1) * page_size


def paginate(ordered_source: Sequence[T], page_number: int, page_size: int) -> Page[T]:
    """Window over an in-memory ordered sequence. Inputs are expected to be clamped already."""
    start = _offset(page_number, page_size)
    return Page(
        items=tuple(ordered_source[start:start + page_size]),
        total_count=len(ordered_source),
        current_page=page_number,
        page_size=page_size,
    )


def paginate_query(q: Query, page_number: int, page_size: int) -> Page:
    """Same as `paginate`, but counts and slices in the database."""
    total = q.count()
    rows = q.offset(_offset(page_number, page_size)).limit(page_size).all()
    return Page(items=tuple(rows), total_count=total, current_page=page_number, page_size=page_size)


def pagination_metadata(page: Page) -> dict[str, int]:
    return {
        "totalCount": page.total_count,
        "pageSize": page.page_size,
        "currentPage": page.current_page,
        "totalPages": page.total_pages,
    }


def pagination_header(page: Page) -> str:
    return json.dumps(pagination_metadata(page), separators=(",", ":"))
