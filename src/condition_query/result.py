"""Response envelopes and the ResultAssembler."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .pagination import resolve_page, total_pages

RecordTransform = Callable[[list[Any]], Sequence[Any]]


class QueryResult(BaseModel):
    """One page of records plus the counts needed to render a pager."""

    model_config = ConfigDict(populate_by_name=True)

    data: list[Any] = Field(default_factory=list)
    total: int = 0
    total_pages: int = Field(default=0, alias="totalPages")
    current_page: int = Field(default=1, alias="currentPage")


class MutationResult(BaseModel):
    """Discriminated outcome of a create/update/delete call."""

    success: bool
    data: Any | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: Any | None = None) -> MutationResult:
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: str) -> MutationResult:
        return cls(success=False, error=error)


def assemble(
    records: Sequence[Any],
    total: int,
    page_number: int | None,
    page_size: int | None,
    transform: RecordTransform | None = None,
) -> QueryResult:
    """Shape query output into a :class:`QueryResult`. Performs no I/O.

    ``transform`` receives the whole record list and its return value becomes
    ``data``; without it records pass through unchanged.
    """
    page, size = resolve_page(page_number, page_size)
    items = list(records)
    data = list(transform(items)) if transform is not None else items
    return QueryResult(
        data=data,
        total=total,
        total_pages=total_pages(total, size),
        current_page=page,
    )
