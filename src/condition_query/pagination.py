"""PaginationCalculator: page number/size -> offset/limit and page counts."""

from __future__ import annotations

import math
from typing import NamedTuple

from .exceptions import InvalidPaginationError

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 20


class Pagination(NamedTuple):
    offset: int
    limit: int


def resolve_page(
    page_number: int | None, page_size: int | None
) -> tuple[int, int]:
    """Apply defaults to falsy inputs and reject values that cannot page."""
    page = page_number or DEFAULT_PAGE_NUMBER
    size = page_size or DEFAULT_PAGE_SIZE
    if page < 1:
        raise InvalidPaginationError(
            {"page_number": [f"Must be >= 1, got {page_number!r}"]}
        )
    if size < 1:
        raise InvalidPaginationError(
            {"page_size": [f"Must be >= 1, got {page_size!r}"]}
        )
    return page, size


def get_pagination(
    page_number: int | None = None, page_size: int | None = None
) -> Pagination:
    """Return the ``(offset, limit)`` window for a 1-based page."""
    page, size = resolve_page(page_number, page_size)
    return Pagination(offset=(page - 1) * size, limit=size)


def total_pages(total: int, page_size: int | None) -> int:
    """Return ``ceil(total / page_size)``.

    Raises:
        InvalidPaginationError: ``page_size`` is missing, zero or negative,
            or ``total`` is negative.
    """
    if not page_size or page_size < 0:
        raise InvalidPaginationError(
            {"page_size": [f"Must be >= 1 to count pages, got {page_size!r}"]}
        )
    if total < 0:
        raise InvalidPaginationError({"total": [f"Must be >= 0, got {total!r}"]})
    return math.ceil(total / page_size)
