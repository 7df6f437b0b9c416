"""
Pagination strategies for in-memory collections.

Two strategies are supported:

- offset/limit: a bare window over the collection, without any metadata;
- page/page size: a 1-based page of the collection plus totals and
  navigation flags (``PageResult``).

Out-of-range parameters are clamped, never rejected.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class PageResult(BaseModel, Generic[T]):
    """A single page of a collection with its paging metadata."""

    model_config = ConfigDict(frozen=True)

    items: list[T]
    total_count: int
    page_size: int
    current_page: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


def slice_offset_limit(collection: Sequence[T], offset: int, limit: int) -> list[T]:
    """Return at most ``limit`` items starting at ``offset``.

    ``offset`` is clamped to ``[0, len(collection)]``; a negative ``limit``
    yields an empty window.
    """
    total = len(collection)
    start = min(max(offset, 0), total)
    end = min(start + max(limit, 0), total)
    return list(collection[start:end])


def total_pages_for(total_count: int, page_size: int) -> int:
    """Number of pages needed for ``total_count`` items (ceiling division)."""
    return (total_count + page_size - 1) // page_size


def paginate(collection: Sequence[T], page: int, page_size: int) -> PageResult[T]:
    """Return page ``page`` (1-based) of ``collection``.

    ``page_size`` below 1 is treated as 1 and ``page`` below 1 as 1. A page
    past the end has no items but still reports the collection totals.
    """
    page_size = max(page_size, 1)
    page = max(page, 1)

    total = len(collection)
    total_pages = total_pages_for(total, page_size)
    offset = (page - 1) * page_size

    items: list[T] = []
    if offset < total:
        items = list(collection[offset : min(offset + page_size, total)])

    return PageResult(
        items=items,
        total_count=total,
        page_size=page_size,
        current_page=page,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )
