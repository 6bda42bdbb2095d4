"""
Exception handlers for the gateway.

Maps LabLinkError families to HTTP status codes and renders them as
``{"error", "code", "details"}`` bodies.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    LabLinkError,
    RateLimitExceededError,
    create_error_response,
    get_http_status_code,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI, is_production: bool = True) -> None:
    """Register exception handlers for the application.

    Args:
        app: FastAPI application instance
        is_production: Hide internal error detail from 500 responses
    """

    @app.exception_handler(LabLinkError)
    async def lablink_exception_handler(request: Request, exc: LabLinkError):
        status_code = get_http_status_code(exc)
        headers = None

        if isinstance(exc, RateLimitExceededError):
            headers = {"Retry-After": str(exc.retry_after)}

        if status_code >= 500:
            logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
            content = {"error": "Internal server error", "code": exc.error_code}
            if not is_production:
                content["details"] = {"message": exc.message, **exc.details}
        else:
            content = create_error_response(exc)

        return JSONResponse(status_code=status_code, content=content, headers=headers)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        message = "An unexpected error occurred" if is_production else str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "message": message},
        )
