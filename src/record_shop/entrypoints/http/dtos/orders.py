from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

MAX_ORDER_QUANTITY = 10000


class CreateOrderRequestDTO(BaseModel):
    """Request payload for placing an order against one record."""

    record_id: UUID = Field(
        description="ID of the record to order",
        examples=["550e8400-e29b-41d4-a716-446655440000"],
    )
    quantity: int = Field(
        description="Units to order",
        examples=[1],
        ge=1,
        le=MAX_ORDER_QUANTITY,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "record_id": "550e8400-e29b-41d4-a716-446655440000",
                "quantity": 2,
            }
        }
    )


class OrderResponseDTO(BaseModel):
    id: str
    record_id: str
    quantity: int
    created_at: datetime
