"""Tests for FastAPI exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from record_shop.domain.errors import (
    AlreadyExistsError,
    ConcurrentModificationError,
    ConflictError,
    DomainError,
    InsufficientStockError,
    InternalError,
    InvalidIdentifierError,
    NotFoundError,
    OrderPlacementFailedError,
    UpdateFailedError,
    ValidationError,
)
from record_shop.entrypoints.http.exception_handlers import (
    register_exception_handlers,
    status_code_for,
)


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    # Add test routes that raise different errors
    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Validation failed")

    @test_app.get("/validation-error-with-fields")
    def raise_validation_error_with_fields() -> None:
        raise ValidationError(
            errors=[
                {"field": "artist", "message": "Must not be empty", "code": "REQUIRED"},
                {"field": "price", "message": "Must be >= 0", "code": "INVALID_VALUE"},
            ]
        )

    @test_app.get("/invalid-identifier")
    def raise_invalid_identifier() -> None:
        raise InvalidIdentifierError(field="record_id", value="abc")

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("Record", "123")

    @test_app.get("/conflict-error")
    def raise_conflict_error() -> None:
        raise ConflictError("Conflict")

    @test_app.get("/already-exists")
    def raise_already_exists() -> None:
        raise AlreadyExistsError("Record already exists")

    @test_app.get("/concurrent-modification")
    def raise_concurrent_modification() -> None:
        raise ConcurrentModificationError("Stock changed while placing the order")

    @test_app.get("/insufficient-stock")
    def raise_insufficient_stock() -> None:
        raise InsufficientStockError(record_id="r-1", requested=3, available=1)

    @test_app.get("/order-placement-failed")
    def raise_order_placement_failed() -> None:
        raise OrderPlacementFailedError(record_id="r-1")

    @test_app.get("/update-failed")
    def raise_update_failed() -> None:
        raise UpdateFailedError(record_id="r-1")

    @test_app.get("/internal-error")
    def raise_internal_error() -> dict:
        raise InternalError("Unexpected condition")

    @test_app.get("/unknown-domain-error")
    def raise_unknown_domain_error() -> None:
        raise DomainError("Something domain specific")

    @test_app.get("/value-error")
    def raise_value_error() -> dict:
        raise ValueError("Invalid decimal format")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> dict:
        raise RuntimeError("Something went wrong")

    @test_app.get("/typed-query")
    def typed_query(limit: int) -> dict:
        return {"limit": limit}

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


class TestValidationErrorHandler:
    """Tests for ValidationError exception handler."""

    def test_simple_validation_error_returns_422(self, client: TestClient) -> None:
        """ValidationError returns 422 with structured error."""
        response = client.get("/validation-error")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
        }

    def test_validation_error_with_field_errors_returns_422(self, client: TestClient) -> None:
        """ValidationError with field errors returns 422 with errors array."""
        response = client.get("/validation-error-with-fields")

        assert response.status_code == 422
        data = response.json()

        assert data["code"] == "VALIDATION_ERROR"
        assert [error["field"] for error in data["errors"]] == ["artist", "price"]
        assert data["errors"][0]["code"] == "REQUIRED"

    def test_invalid_identifier_returns_400(self, client: TestClient) -> None:
        response = client.get("/invalid-identifier")

        assert response.status_code == 400
        assert response.json() == {
            "detail": "'abc' is not a valid identifier",
            "code": "INVALID_IDENTIFIER",
            "errors": [
                {
                    "field": "record_id",
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_UUID",
                }
            ],
        }


class TestNotFoundErrorHandler:
    """Tests for NotFoundError exception handler."""

    def test_not_found_error_returns_404(self, client: TestClient) -> None:
        """NotFoundError returns 404 with structured error."""
        response = client.get("/not-found-error")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Record with identifier '123' not found",
            "code": "NOT_FOUND",
        }


class TestConflictErrorHandler:
    """Tests for the conflict family."""

    @pytest.mark.parametrize(
        "path,code",
        [
            ("/conflict-error", "CONFLICT"),
            ("/already-exists", "ALREADY_EXISTS"),
            ("/concurrent-modification", "CONCURRENT_MODIFICATION"),
        ],
    )
    def test_conflicts_return_409(self, client: TestClient, path: str, code: str) -> None:
        response = client.get(path)

        assert response.status_code == 409
        assert response.json()["code"] == code


class TestOrderErrorHandler:
    """Tests for order placement errors."""

    def test_insufficient_stock_returns_422(self, client: TestClient) -> None:
        response = client.get("/insufficient-stock")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Not enough records in stock",
            "code": "INSUFFICIENT_STOCK",
        }

    def test_order_placement_failed_returns_503(self, client: TestClient) -> None:
        response = client.get("/order-placement-failed")

        assert response.status_code == 503
        assert response.json() == {
            "detail": "Could not place order",
            "code": "ORDER_PLACEMENT_FAILED",
        }


class TestInternalErrorHandler:
    """Tests for internal errors."""

    def test_internal_error_returns_500(self, client: TestClient) -> None:
        """InternalError returns 500 with structured error."""
        response = client.get("/internal-error")

        assert response.status_code == 500

    def test_update_failed_returns_500(self, client: TestClient) -> None:
        response = client.get("/update-failed")

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to update record", "code": "UPDATE_FAILED"}

    def test_unknown_domain_code_returns_400(self, client: TestClient) -> None:
        response = client.get("/unknown-domain-error")

        assert response.status_code == 400
        assert response.json()["code"] == "DOMAIN_ERROR"


class TestValueErrorHandler:
    """Tests for ValueError exception handler."""

    def test_value_error_returns_422(self, client: TestClient) -> None:
        """ValueError returns 422 with structured error."""
        response = client.get("/value-error")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Invalid decimal format",
            "code": "INVALID_VALUE",
        }


class TestUnexpectedErrorHandler:
    """Tests for the catch-all handler."""

    def test_unexpected_error_returns_500(self, client: TestClient) -> None:
        response = client.get("/unexpected-error")

        assert response.status_code == 500


class TestRequestValidationErrorHandler:
    """Tests for FastAPI request validation errors."""

    def test_bad_query_param_returns_structured_422(self, client: TestClient) -> None:
        response = client.get("/typed-query", params={"limit": "abc"})

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert data["detail"] == "Invalid request parameters"
        assert data["errors"][0]["field"] == "limit"


def test_status_code_for_known_and_unknown_codes() -> None:
    assert status_code_for("NOT_FOUND") == 404
    assert status_code_for("ORDER_PLACEMENT_FAILED") == 503
    assert status_code_for("SOMETHING_ELSE") == 400
