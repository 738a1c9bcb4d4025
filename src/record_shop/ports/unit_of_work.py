from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from record_shop.ports.order_repository import OrderRepository
from record_shop.ports.record_catalog_repository import RecordCatalogRepository


class UnitOfWork(ABC):
    """
    Transactional scope over the catalog and the order ledger.

    Usage:
        with uow:
            uow.records.decrement_stock(...)
            uow.orders.add(...)
            uow.commit()

    Leaving the block without commit(), or with an exception, rolls back
    every write made inside it. A unit of work may be entered again after
    it exits; each entry is a new transaction.
    """

    records: RecordCatalogRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        self._begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self.rollback()
        finally:
            self._end()

    @abstractmethod
    def _begin(self) -> None: ...

    @abstractmethod
    def _end(self) -> None: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None:
        """Discard uncommitted writes. No-op after a successful commit."""
        ...
