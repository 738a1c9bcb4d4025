"""
Unit tests for FastAPI application setup and configuration.

Verifies application metadata, documentation endpoints and router
registration without touching the database.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from record_shop.entrypoints.http.app import build_app


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_fastapi_instance() -> None:
    """build_app() returns a FastAPI application instance."""
    assert isinstance(build_app(), FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    """build_app() creates a new app instance for each call (not cached)."""
    assert build_app() is not build_app()


# ==============================================================================
# Application Metadata
# ==============================================================================


def test_app_metadata() -> None:
    app = build_app()

    assert app.title == "Record Shop API"
    assert app.version == "0.1.0"
    assert "Record store API" in app.description
    assert app.contact == {"name": "Record Shop Team", "email": "dev@record-shop.example.com"}
    assert app.license_info == {"name": "Proprietary"}


def test_app_documentation_endpoints_are_accessible() -> None:
    """Documentation endpoints are accessible."""
    client = TestClient(build_app())

    assert client.get("/docs").status_code == 200
    assert client.get("/redoc").status_code == 200

    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


# ==============================================================================
# Router Registration
# ==============================================================================


def test_app_includes_health_router() -> None:
    """Health endpoint is served at the root, outside /v1."""
    client = TestClient(build_app())

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_app_registers_versioned_routes() -> None:
    """Record and order routes live under /v1 (checked via OpenAPI, no dependencies run)."""
    paths = build_app().openapi()["paths"]

    assert "/health" in paths
    assert "/records" not in paths
    assert set(paths["/v1/records"]) == {"get", "post"}
    assert set(paths["/v1/records/{record_id}"]) == {"get", "put"}
    assert set(paths["/v1/orders"]) == {"post"}


def test_search_query_params_are_documented() -> None:
    """Query parameter model is flattened into individual parameters."""
    operation = build_app().openapi()["paths"]["/v1/records"]["get"]

    names = {parameter["name"] for parameter in operation["parameters"]}
    assert names == {"q", "artist", "album", "format", "category", "page", "limit"}
