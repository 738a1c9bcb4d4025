from __future__ import annotations

from abc import ABC, abstractmethod

from record_shop.domain.order import Order


class OrderRepository(ABC):
    """Port for the order ledger. Orders are insert-only."""

    @abstractmethod
    def add(self, record_id: str, quantity: int) -> Order: ...
