"""LabLink gateway application.

FastAPI application exposing the order and upload validation functions
with security headers, CORS and centralized error handling.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..__version__ import __version__
from ..config.settings import LabLinkSettings, get_settings
from .exception_handlers import register_exception_handlers
from .middleware import SecurityHeadersMiddleware
from .routers import files_router, orders_router
from .services import ServiceContainer, build_services

logger = logging.getLogger(__name__)

FUNCTIONS_PREFIX = "/functions/v1"

EXPOSED_HEADERS = [
    "X-RateLimit-Limit",
    "X-RateLimit-Remaining",
    "X-RateLimit-Reset",
    "Retry-After",
]


def create_app(
    settings: Optional[LabLinkSettings] = None,
    services: Optional[ServiceContainer] = None
) -> FastAPI:
    """Create the gateway application.

    Args:
        settings: Settings to use, defaults to the cached environment settings
        services: Prebuilt services; when omitted they are built on startup
            and closed on shutdown

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = services is None
        container = services or await build_services(settings)
        app.state.services = container
        logger.info(f"{settings.app_name} started in {settings.environment} mode")

        yield

        if owned:
            await container.close()
        logger.info(f"{settings.app_name} stopped")

    app = FastAPI(
        title="LabLink API",
        version=__version__,
        description="Order intake and attachment validation for dental lab orders",
        debug=settings.debug,
        lifespan=lifespan,
    )
    if services is not None:
        app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
        expose_headers=EXPOSED_HEADERS,
    )
    app.add_middleware(SecurityHeadersMiddleware)

    register_exception_handlers(app, is_production=settings.is_production)

    app.include_router(orders_router, prefix=FUNCTIONS_PREFIX)
    app.include_router(files_router, prefix=FUNCTIONS_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "healthy", "service": settings.app_name, "version": __version__}

    @app.get("/health/ready", tags=["Health"])
    async def readiness(request: Request):
        container: ServiceContainer = request.app.state.services
        database_ok = True
        if container.database is not None:
            database_ok = await container.database.health_check()

        status_code = 200 if database_ok else 503
        return JSONResponse(
            status_code=status_code,
            content={
                "status": "ready" if database_ok else "unavailable",
                "database": "healthy" if database_ok else "unhealthy",
            },
        )

    return app
