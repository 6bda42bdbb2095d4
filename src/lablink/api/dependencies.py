"""FastAPI dependencies for the gateway routers."""

from typing import Optional

from fastapi import Depends, Request

from .auth import AuthenticatedUser
from .services import ServiceContainer


def get_services(request: Request) -> ServiceContainer:
    """Get the service container from app state."""
    return request.app.state.services


def get_current_user(
    request: Request,
    services: ServiceContainer = Depends(get_services)
) -> AuthenticatedUser:
    """Verify the bearer token on the request."""
    return services.token_verifier.verify(request.headers.get("Authorization"))


def get_client_ip(request: Request) -> Optional[str]:
    """First proxy hop address reported by the edge, if any."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    return request.headers.get("x-real-ip") or request.headers.get("cf-connecting-ip")


def get_client_identifier(request: Request, user_id: Optional[str] = None) -> str:
    """Identity used for rate limiting: the user id when known, else the client address."""
    if user_id:
        return user_id
    return get_client_ip(request) or "unknown"
