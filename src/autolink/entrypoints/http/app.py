from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from autolink.adapters.in_memory_listing_repository import InMemoryListingRepository
from autolink.entrypoints.http.exception_handlers import register_exception_handlers
from autolink.entrypoints.http.routes.cars import router as cars_router
from autolink.entrypoints.http.routes.health import router as health_router
from autolink.entrypoints.http.routes.payments import router as payments_router
from autolink.entrypoints.http.routes.pricing import router as pricing_router
from autolink.infra.config.settings import Settings, get_settings
from autolink.infra.logger import configure_logging
from autolink.infra.seed import seed_listings
from autolink.ports.listing_repository import ListingRepository

logger = logging.getLogger(__name__)


def build_app(
    settings: Settings | None = None,
    listing_repository: ListingRepository | None = None,
) -> FastAPI:
    """
    Create a configured application.

    Each app owns its listing store: by default a fresh in-memory store
    seeded with the starter inventory. Pass a repository to share or
    replace it (tests).
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="AutoLink API",
        description="""
        Car marketplace API for browsing, listing and buying vehicles.

        ## Features
        - Browse listings with filters
        - Get listing details
        - Submit a listing with a photo
        - AI price suggestions
        - Hosted checkout sessions

        ## Authentication
        Currently no authentication required.

        ## Error Handling
        All errors return structured JSON responses with error codes;
        checkout failures use the `{"error": "..."}` shape.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    if listing_repository is None:
        listing_repository = InMemoryListingRepository(seed_listings())
    app.state.settings = settings
    app.state.listing_repository = listing_repository

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")
    app.include_router(pricing_router, prefix="/v1")
    app.include_router(payments_router, prefix="/v1")

    # Uploaded photos are served from the upload directory
    app.mount(
        settings.upload_public_prefix,
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    logger.info(
        "Application built",
        extra={
            "payments_enabled": settings.payments_enabled,
            "price_suggestions_enabled": settings.price_suggestions_enabled,
        },
    )
    return app


app = build_app()
