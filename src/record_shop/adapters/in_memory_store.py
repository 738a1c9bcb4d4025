from __future__ import annotations

import threading
from typing import Iterable

from record_shop.domain.order import Order
from record_shop.domain.record import CatalogItem


class InMemoryStore:
    """
    Shared state behind the in-memory adapters.

    - Records are kept in insertion order (the store's natural order)
    - The re-entrant lock serializes units of work, which gives
      serializable isolation for concurrent order attempts
    """

    def __init__(self, records: Iterable[CatalogItem] = ()) -> None:
        self.records: dict[str, CatalogItem] = {record.id: record for record in records}
        self.orders: list[Order] = []
        self.lock = threading.RLock()

    def snapshot(self) -> tuple[dict[str, CatalogItem], list[Order]]:
        return dict(self.records), list(self.orders)

    def restore(self, snapshot: tuple[dict[str, CatalogItem], list[Order]]) -> None:
        records, orders = snapshot
        self.records = dict(records)
        self.orders = list(orders)
