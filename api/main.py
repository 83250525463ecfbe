#!/usr/bin/env python3
"""
Fest Admin API - HTTP API layer for the fest registration admin panel.

This is the main FastAPI application serving the admin view. It exposes:
- Registration listing, editing and deletion
- The event catalogue
- PDF export of the team-grouped registration report
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from festadmin.errors import StoreConnectionError
from festadmin.logging_config import configure_logging, get_logger

from .dependencies import get_connector, reset_connector
from .services.registration_service import MISSING_DATA, Invalid
from .settings import get_settings

# Configure unified logging format
# Format: 2026-01-06T14:05:52Z [api] LEVEL message
configure_logging(source="api")
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle - startup and shutdown."""
    settings = get_settings()

    # Startup
    if not settings.skip_store_connect:
        try:
            await asyncio.to_thread(get_connector().connect)
        except StoreConnectionError as e:
            # Requests reissue connect(), so the API can come up before the store does
            logger.error(f"Store not reachable at startup: {e}")
    else:
        logger.warning("Skipping store connection on startup (SKIP_STORE_CONNECT=true)")

    yield

    # Shutdown
    reset_connector()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Fest Admin API", description="Fest registration admin API", lifespan=lifespan)

    # Malformed bodies get the same 400 envelope as missing fields
    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError) -> Response:
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return Invalid(MISSING_DATA).to_response()

    settings = get_settings()

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    # Register routers
    from .routers import registrations

    app.include_router(registrations.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "fest-admin"}

    return app


# Create app instance for uvicorn
app = create_app()
