from fastapi import FastAPI

from record_shop.entrypoints.http.exception_handlers import register_exception_handlers
from record_shop.entrypoints.http.routes.health import router as health_router
from record_shop.entrypoints.http.routes.orders import router as orders_router
from record_shop.entrypoints.http.routes.records import router as records_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Record Shop API",
        description="""
        Record store API for browsing the catalog, managing records and placing orders.

        ## Features
        - Search the record catalog with free text, filters and pagination
        - Add and update records, with track lists fetched from MusicBrainz
        - Place orders with atomic stock decrement

        ## Authentication
        Currently no authentication required (development phase).

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        contact={
            "name": "Record Shop Team",
            "email": "dev@record-shop.example.com",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(records_router, prefix="/v1")
    app.include_router(orders_router, prefix="/v1")

    return app


app = build_app()
