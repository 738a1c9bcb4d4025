from fastapi import APIRouter, Depends, status

from record_shop.entrypoints.http.dependencies import get_place_order_use_case
from record_shop.entrypoints.http.dtos.orders import CreateOrderRequestDTO, OrderResponseDTO
from record_shop.entrypoints.http.error_responses import ErrorResponse
from record_shop.entrypoints.http.mappers.order_mapper import OrderMapper
from record_shop.use_cases.place_order import PlaceOrder


router = APIRouter(tags=["Orders"])


@router.post(
    "/orders",
    response_model=OrderResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
    description="""
    Place an order for one record.

    Stock is decremented and the order is stored in one transaction:
    either both happen or neither does.

    ## Outcomes
    - 201: order placed, stock decremented
    - 404: record does not exist
    - 409: stock changed while the order was being placed (safe to retry)
    - 422: invalid payload or not enough stock
    - 503: the transaction could not be completed

    ## Example
    ```
    POST /v1/orders
    {
        "record_id": "550e8400-e29b-41d4-a716-446655440000",
        "quantity": 2
    }
    ```
    """,
    responses={
        201: {
            "description": "Order placed",
            "content": {
                "application/json": {
                    "example": {
                        "id": "0c7f4b7e-8f0c-4d1b-b1de-7d1f0a7b9a11",
                        "record_id": "550e8400-e29b-41d4-a716-446655440000",
                        "quantity": 2,
                        "created_at": "2024-01-01T12:00:00Z",
                    }
                }
            },
        },
        404: {"model": ErrorResponse, "description": "Record not found"},
        409: {"model": ErrorResponse, "description": "Concurrent modification"},
        422: {
            "model": ErrorResponse,
            "description": "Validation error or insufficient stock",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Not enough records in stock",
                        "code": "INSUFFICIENT_STOCK",
                    }
                }
            },
        },
        503: {"model": ErrorResponse, "description": "Order could not be placed"},
    },
)
def create_order(
    payload: CreateOrderRequestDTO,
    use_case: PlaceOrder = Depends(get_place_order_use_case),
) -> OrderResponseDTO:
    """Place order endpoint following parse → execute → map → return pattern."""
    request = OrderMapper.to_domain_request(payload)

    result = use_case.execute(request)

    return OrderMapper.to_response(result.order)
