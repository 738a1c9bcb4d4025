"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to appropriate formats (HTTP today) by protocol adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to an HTTP (or any other protocol) response.
    """

    # Stable error code, one per failure kind
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - price < 0
        - order quantity < 1
        - page or limit < 1

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "price", "message": "Must be >= 0"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class InvalidIdentifierError(ValidationError):
    """Identifier is not well formed for the store (not a UUID).

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "INVALID_IDENTIFIER"

    def __init__(self, field: str, value: str, **context: Any) -> None:
        super().__init__(
            errors=[
                {
                    "field": field,
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_UUID",
                }
            ],
            message=f"'{value}' is not a valid identifier",
            **context,
        )


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Record with ID not found
        - Order placed against a record that does not exist

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Record", "Order")
            identifier: Resource identifier (e.g., UUID)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Business constraint conflict.

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class AlreadyExistsError(ConflictError):
    """A record with the same artist, album and format already exists."""

    error_code: str = "ALREADY_EXISTS"


class ConcurrentModificationError(ConflictError):
    """A guarded write lost the race against a concurrent writer.

    Callers may retry.
    """

    error_code: str = "CONCURRENT_MODIFICATION"


class InsufficientStockError(DomainError):
    """Requested quantity exceeds the quantity on hand.

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "INSUFFICIENT_STOCK"

    def __init__(self, record_id: str, requested: int, available: int) -> None:
        super().__init__(
            "Not enough records in stock",
            record_id=record_id,
            requested=requested,
            available=available,
        )


class OrderPlacementFailedError(DomainError):
    """Order transaction aborted for a storage-level reason.

    Storage detail is logged, never carried in the message.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "ORDER_PLACEMENT_FAILED"

    def __init__(self, record_id: str) -> None:
        super().__init__("Could not place order", record_id=record_id)


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"


class UpdateFailedError(InternalError):
    """A catalog update reported zero modified rows."""

    error_code: str = "UPDATE_FAILED"

    def __init__(self, record_id: str) -> None:
        super().__init__("Failed to update record", record_id=record_id)
