from __future__ import annotations

import uuid
from datetime import datetime, timezone

from record_shop.adapters.in_memory_store import InMemoryStore
from record_shop.domain.order import Order
from record_shop.ports.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):
    """Append-only order ledger kept in the shared InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def add(self, record_id: str, quantity: int) -> Order:
        order = Order(
            id=str(uuid.uuid4()),
            record_id=record_id,
            quantity=quantity,
            created_at=datetime.now(timezone.utc),
        )
        with self._store.lock:
            self._store.orders.append(order)
        return order
