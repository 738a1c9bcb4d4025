"""Place order use case: guarded stock decrement plus order insert, atomically."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from record_shop.domain.errors import (
    ConcurrentModificationError,
    InsufficientStockError,
    NotFoundError,
    OrderPlacementFailedError,
)
from record_shop.domain.order import Order, OrderRequest, OrderStage
from record_shop.ports.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlaceOrderRequest:
    record_id: str
    quantity: int


@dataclass(frozen=True, slots=True)
class PlaceOrderResponse:
    order: Order


class PlaceOrder:
    """
    Order transaction coordinator.

    Within one unit of work:
    1. read the record (NotFoundError if absent)
    2. compare quantity on hand with the requested quantity (InsufficientStockError)
    3. guarded decrement, re-asserting quantity >= requested at write time
       (ConcurrentModificationError if the guard matches nothing)
    4. insert the order
    5. commit

    Any failure rolls the unit of work back: no partial decrement and no
    orphan order is ever committed. Business outcomes (1-3) propagate as-is;
    every other failure surfaces as OrderPlacementFailedError with the cause
    logged. No retries here; retry policy belongs to the caller.
    """

    _PROPAGATED = (NotFoundError, InsufficientStockError, ConcurrentModificationError)

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        self._uow = unit_of_work

    def execute(self, request: PlaceOrderRequest) -> PlaceOrderResponse:
        """
        Execute order placement.

        Args:
            request: Record ID and positive quantity

        Returns:
            PlaceOrderResponse with the committed order

        Raises:
            ValidationError: If quantity is not a positive integer
            NotFoundError: If the record does not exist
            InsufficientStockError: If stock is lower than the requested quantity
            ConcurrentModificationError: If a concurrent order drained the stock first
            OrderPlacementFailedError: If the transaction failed for any other reason
        """
        OrderRequest(record_id=request.record_id, quantity=request.quantity).validate()

        stage = OrderStage.STARTED
        try:
            with self._uow as uow:
                record = uow.records.get_by_id(request.record_id)
                if record is None:
                    raise NotFoundError(resource="Record", identifier=request.record_id)

                if record.quantity < request.quantity:
                    raise InsufficientStockError(
                        record_id=record.id,
                        requested=request.quantity,
                        available=record.quantity,
                    )
                stage = OrderStage.STOCK_VERIFIED

                if not uow.records.decrement_stock(record.id, request.quantity):
                    raise ConcurrentModificationError(
                        "Stock changed while placing the order", record_id=record.id
                    )
                stage = OrderStage.STOCK_DECREMENTED

                order = uow.orders.add(record_id=record.id, quantity=request.quantity)
                stage = OrderStage.ORDER_INSERTED

                uow.commit()
                stage = OrderStage.COMMITTED
        except self._PROPAGATED as exc:
            logger.info(
                "Order rejected",
                extra={
                    "record_id": request.record_id,
                    "quantity": request.quantity,
                    "stage": stage.value,
                    "error_code": exc.error_code,
                },
            )
            raise
        except Exception as exc:
            logger.warning(
                "Order placement aborted",
                exc_info=exc,
                extra={
                    "record_id": request.record_id,
                    "quantity": request.quantity,
                    "stage": stage.value,
                    "error_type": type(exc).__name__,
                },
            )
            raise OrderPlacementFailedError(record_id=request.record_id) from None

        logger.info(
            "Order placed",
            extra={"order_id": order.id, "record_id": order.record_id, "quantity": order.quantity},
        )
        return PlaceOrderResponse(order=order)
