"""Offset pagination over ORM queries."""

import math
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Query

# Keeps (page - 1) * limit well inside a 64-bit OFFSET
MAX_PAGE = 1_000_000


@dataclass(frozen=True)
class PageParams:
    """1-indexed page request, already validated and clamped."""

    page: int = 1
    limit: int = 10

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page:
    """One page of rows plus the total for the same filter."""

    items: list[Any]
    total: int
    params: PageParams

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.params.limit)

    @property
    def has_next_page(self) -> bool:
        return self.params.skip + len(self.items) < self.total

    @property
    def has_prev_page(self) -> bool:
        return self.params.page > 1

    def metadata(self, total_key: str) -> dict:
        """Pagination block for the response, with the total under `total_key`."""
        return {
            "current_page": self.params.page,
            "total_pages": self.total_pages,
            total_key: self.total,
            "has_next_page": self.has_next_page,
            "has_prev_page": self.has_prev_page,
        }


def build_page_params(page: int, limit: int | None, default_limit: int, max_limit: int) -> PageParams:
    """Apply the default limit and clamp oversized ones."""
    if limit is None:
        limit = default_limit
    return PageParams(page=page, limit=min(limit, max_limit))


def paginate(query: Query, params: PageParams) -> Page:
    """Run `query` for one page and count the full result.

    The caller supplies the ordering. Eager loads on `query` must not add
    joins (use selectinload) so the count matches the row filter.
    """
    total = query.order_by(None).count()
    items = query.offset(params.skip).limit(params.limit).all()
    return Page(items=items, total=total, params=params)
