"""Order creation endpoint."""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...config.constants import CREATE_ORDER_ENDPOINT
from ...core.exceptions import DatabaseError, InvalidOrderError
from ..auth import AuthenticatedUser
from ..dependencies import get_client_identifier, get_current_user, get_services
from ..services import ServiceContainer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Orders"])


@router.post("/create-order", status_code=201)
async def create_order(
    request: Request,
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
):
    """Create an order for the authenticated doctor, subject to rate limits."""
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid JSON", "message": "Request body must be valid JSON"},
        )

    headers = {}
    if services.rate_limiter is not None:
        identifier = get_client_identifier(request, user.id)
        decision = await services.rate_limiter.check(identifier, CREATE_ORDER_ENDPOINT)
        headers = decision.headers()
        if not decision.allowed:
            logger.info(f"Rate limit exceeded for user {user.id}")
            return JSONResponse(
                status_code=429,
                content={
                    "error": "Too many requests",
                    "message": decision.message,
                    "resetAt": decision.reset_at.isoformat(),
                },
                headers=headers,
            )

    try:
        result = await services.create_order_command.execute(user.id, payload)
    except InvalidOrderError as e:
        return JSONResponse(
            status_code=400,
            content={
                "error": "Validation failed",
                "message": e.message,
                "validationErrors": [error.to_dict() for error in e.errors],
            },
            headers=headers,
        )
    except DatabaseError as e:
        logger.error(f"Database error: {e.message}")
        return JSONResponse(
            status_code=500,
            content={"error": "Database error", "message": "Failed to create order"},
            headers=headers,
        )

    return JSONResponse(status_code=201, content=result.to_response(), headers=headers)
