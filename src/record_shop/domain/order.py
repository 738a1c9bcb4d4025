from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from record_shop.domain.errors import ValidationError


class OrderStage(str, Enum):
    """Progress of a single order attempt. Any stage may end in an abort."""

    STARTED = "started"
    STOCK_VERIFIED = "stock_verified"
    STOCK_DECREMENTED = "stock_decremented"
    ORDER_INSERTED = "order_inserted"
    COMMITTED = "committed"


@dataclass(frozen=True)
class Order:
    id: str
    record_id: str
    quantity: int
    created_at: datetime


@dataclass(frozen=True, slots=True)
class OrderRequest:
    record_id: str
    quantity: int

    def validate(self) -> None:
        # bool is an int subclass; reject it explicitly
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                errors=[
                    {"field": "quantity", "message": "Must be an integer", "code": "INVALID_VALUE"}
                ]
            )
        if self.quantity < 1:
            raise ValidationError(
                errors=[{"field": "quantity", "message": "Must be >= 1", "code": "INVALID_VALUE"}]
            )
