"""Offset pagination over SQLAlchemy select statements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from content_graph.core.errors import InvalidInputError
from content_graph.core.settings import settings

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index and a page size already clamped to the maximum."""

    page: int
    size: int

    @classmethod
    def of(cls, page: int = 0, size: int | None = None) -> PageRequest:
        """Validate the page index and clamp the size.

        Sizes above ``FEED_MAX_PAGE_SIZE`` are served at the maximum rather
        than rejected.

        Raises:
            InvalidInputError: If ``page`` is negative or ``size`` is below 1.
        """
        if size is None:
            size = settings.feed_default_page_size
        if page < 0:
            raise InvalidInputError(f"Page index must be >= 0, got {page}")
        if size < 1:
            raise InvalidInputError(f"Page size must be >= 1, got {size}")
        return cls(page=page, size=min(size, settings.feed_max_page_size))

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """One page of results plus the total number of matching rows."""

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 0
    size: int = 0

    @property
    def total_pages(self) -> int:
        if self.size == 0:
            return 0
        return -(-self.total // self.size)

    @property
    def has_next(self) -> bool:
        return (self.page + 1) * self.size < self.total


def fetch_page(session: Session, stmt: Select, request: PageRequest) -> Page:
    """Run ``stmt`` for one page and count all rows it would match."""
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = session.execute(count_stmt).scalar_one()
    items = list(session.execute(stmt.offset(request.offset).limit(request.size)).scalars())
    return Page(items=items, total=total, page=request.page, size=request.size)
