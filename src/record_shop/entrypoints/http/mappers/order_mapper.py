from __future__ import annotations

from record_shop.domain.order import Order
from record_shop.entrypoints.http.dtos.orders import CreateOrderRequestDTO, OrderResponseDTO
from record_shop.use_cases.place_order import PlaceOrderRequest


class OrderMapper:
    """Maps between REST DTOs and domain models for orders."""

    @staticmethod
    def to_domain_request(dto: CreateOrderRequestDTO) -> PlaceOrderRequest:
        return PlaceOrderRequest(record_id=str(dto.record_id), quantity=dto.quantity)

    @staticmethod
    def to_response(order: Order) -> OrderResponseDTO:
        return OrderResponseDTO(
            id=order.id,
            record_id=order.record_id,
            quantity=order.quantity,
            created_at=order.created_at,
        )
