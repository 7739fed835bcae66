"""IDataStoreClient: the storage capability consumed by the service."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IDataStoreClient(Protocol):
    """Collection-scoped client accepting Prisma-style where predicates.

    ``release`` tears down the underlying connection and must be safe to
    call more than once.
    """

    async def find_many(
        self,
        where: dict[str, Any],
        order_by: Any = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[Any]:
        """Return one page of records matching ``where``."""
        ...

    async def count(self, where: dict[str, Any]) -> int:
        """Return the number of records matching ``where``."""
        ...

    async def create(self, data: dict[str, Any]) -> Any:
        """Insert one record and return it."""
        ...

    async def create_many(self, data_list: list[dict[str, Any]]) -> None:
        """Insert several records."""
        ...

    async def delete(self, record_id: Any) -> None:
        """Remove one record by id."""
        ...

    async def update_many(self, where: dict[str, Any], data: dict[str, Any]) -> None:
        """Apply ``data`` to every record matching ``where``."""
        ...

    async def release(self) -> None:
        """Release the underlying connection."""
        ...
