"""PostgreSQL implementation of OrderRepository."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from record_shop.domain.order import Order
from record_shop.infra.db.models.order import OrderRow
from record_shop.ports.order_repository import OrderRepository


class PostgresOrderRepository(OrderRepository):
    """
    Insert-only order ledger.

    Writes join the caller's session, so an order is only visible once the
    surrounding unit of work commits.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, record_id: str, quantity: int) -> Order:
        row = OrderRow(
            id=uuid.uuid4(),
            record_id=uuid.UUID(record_id),
            quantity=quantity,
            created_at=datetime.now(timezone.utc),
        )
        self._session.add(row)
        self._session.flush()
        return self._to_domain(row)

    def _to_domain(self, row: OrderRow) -> Order:
        return Order(
            id=str(row.id),
            record_id=str(row.record_id),
            quantity=row.quantity,
            created_at=row.created_at,
        )
