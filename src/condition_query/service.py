"""DataStoreService: paginated reads and guarded mutations over a store."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidPaginationError
from .pagination import DEFAULT_PAGE_SIZE, get_pagination
from .result import MutationResult, QueryResult, RecordTransform, assemble
from .translator import ConditionTranslator

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable, Mapping

    from .classifier import FieldCategorySets
    from .ports import IDataStoreClient

logger = logging.getLogger("condition_query.service")


@asynccontextmanager
async def released(store: IDataStoreClient) -> AsyncIterator[IDataStoreClient]:
    """Yield ``store`` and release it on every exit path."""
    try:
        yield store
    finally:
        await store.release()


class DataStoreService:
    """Stateless facade combining translation, pagination and store calls.

    Reads propagate store errors to the caller. Mutations never raise for
    store failures; they log the error and return a failed
    :class:`MutationResult`. The store is released after every mutation.
    """

    def __init__(
        self,
        *,
        translator: ConditionTranslator | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int | None = None,
    ) -> None:
        if default_page_size < 1:
            raise InvalidPaginationError(
                {"default_page_size": [f"Must be >= 1, got {default_page_size!r}"]}
            )
        if max_page_size is not None and max_page_size < 1:
            raise InvalidPaginationError(
                {"max_page_size": [f"Must be >= 1, got {max_page_size!r}"]}
            )
        self._translator = translator or ConditionTranslator()
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    def _page_size(self, page_size: int | None) -> int:
        size = page_size or self._default_page_size
        if self._max_page_size is not None:
            size = min(size, self._max_page_size)
        return size

    async def fetch_data_with_pagination(
        self,
        page_number: int | None,
        page_size: int | None,
        conditions: Mapping[str, Any] | None,
        store: IDataStoreClient,
        order_by: Any = None,
        categories: FieldCategorySets | None = None,
        on_data_process: RecordTransform | None = None,
    ) -> QueryResult:
        """Fetch one page of records matching ``conditions``.

        The page query and the count query run one after the other, so the
        total may drift from the page under concurrent writes.
        """
        size = self._page_size(page_size)
        window = get_pagination(page_number, size)
        where = self._translator.translate(conditions, categories)
        records = await store.find_many(
            where, order_by=order_by, limit=window.limit, offset=window.offset
        )
        total = await store.count(where)
        return assemble(records, total, page_number, size, on_data_process)

    async def _mutate(
        self,
        store: IDataStoreClient,
        action: Callable[[], Awaitable[Any]],
        error_message: str,
        *,
        return_data: bool = False,
    ) -> MutationResult:
        async with released(store):
            try:
                data = await action()
            except Exception:
                logger.exception(error_message)
                return MutationResult.failed(error_message)
        return MutationResult.ok(data if return_data else None)

    async def create_data(
        self, store: IDataStoreClient, data: dict[str, Any]
    ) -> MutationResult:
        return await self._mutate(
            store,
            lambda: store.create(data),
            "Error creating data",
            return_data=True,
        )

    async def batch_create_data(
        self, store: IDataStoreClient, data_list: list[dict[str, Any]]
    ) -> MutationResult:
        return await self._mutate(
            store, lambda: store.create_many(data_list), "Error creating data"
        )

    async def delete_data(
        self, store: IDataStoreClient, record_id: Any
    ) -> MutationResult:
        """Physically delete one record."""
        return await self._mutate(
            store, lambda: store.delete(record_id), "Error deleting data"
        )

    async def update_fields(
        self, store: IDataStoreClient, data: dict[str, Any], record_id: Any
    ) -> MutationResult:
        return await self._mutate(
            store,
            lambda: store.update_many({"id": record_id}, data),
            "Error updating data",
        )
