"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "quantity",
                "message": "Must be >= 1",
                "code": "INVALID_VALUE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)

    Examples:
        Simple error:
            {
                "detail": "Record with identifier '...' not found",
                "code": "NOT_FOUND"
            }

        Validation error with field details:
            {
                "detail": "'abc' is not a valid identifier",
                "code": "INVALID_IDENTIFIER",
                "errors": [
                    {
                        "field": "record_id",
                        "message": "Must be a valid UUID format",
                        "code": "INVALID_UUID"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Not enough records in stock", "code": "INSUFFICIENT_STOCK"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "artist",
                            "message": "Must not be empty",
                            "code": "REQUIRED",
                        },
                        {
                            "field": "price",
                            "message": "Must be >= 0",
                            "code": "INVALID_VALUE",
                        },
                    ],
                },
            ]
        }
    )
