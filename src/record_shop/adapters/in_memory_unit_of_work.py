from __future__ import annotations

from record_shop.adapters.in_memory_order_repository import InMemoryOrderRepository
from record_shop.adapters.in_memory_record_catalog_repository import (
    InMemoryRecordCatalogRepository,
)
from record_shop.adapters.in_memory_store import InMemoryStore
from record_shop.ports.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """
    Snapshot-based transaction over an InMemoryStore.

    - Holds the store lock for the whole scope (serializable)
    - Rollback restores the snapshot taken on entry
    - One instance per thread; entries on the same instance are sequential
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self.records = InMemoryRecordCatalogRepository(store)
        self.orders = InMemoryOrderRepository(store)
        self._snapshot: tuple | None = None

    def _begin(self) -> None:
        self._store.lock.acquire()
        self._snapshot = self._store.snapshot()

    def _end(self) -> None:
        self._snapshot = None
        self._store.lock.release()

    def commit(self) -> None:
        self._snapshot = self._store.snapshot()

    def rollback(self) -> None:
        if self._snapshot is not None:
            self._store.restore(self._snapshot)
