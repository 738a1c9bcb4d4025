"""SQLAlchemy-backed UnitOfWork: one session and one transaction per entry."""

from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from record_shop.adapters.postgres_order_repository import PostgresOrderRepository
from record_shop.adapters.postgres_record_catalog_repository import (
    PostgresRecordCatalogRepository,
)
from record_shop.ports.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    - Entering opens a fresh session; the session's transaction begins lazily
      on the first statement
    - commit() commits; leaving the block rolls back whatever was not committed
    - The session is always closed on exit
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work is not active; use it as a context manager")
        return self._session

    def _begin(self) -> None:
        self._session = self._session_factory()
        self.records = PostgresRecordCatalogRepository(self._session)
        self.orders = PostgresOrderRepository(self._session)

    def _end(self) -> None:
        if self._session is not None:
            self._session.close()
        self._session = None

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        # Nothing pending after a successful commit, so this is then a no-op
        if self._session is not None:
            self._session.rollback()
