"""Bearer token verification for the gateway endpoints."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import jwt

from ..core.exceptions import InvalidTokenError, MissingCredentialsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity extracted from a verified access token."""

    id: str
    email: Optional[str] = None
    role: Optional[str] = None
    claims: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


class BearerTokenVerifier:
    """Verifies HS-signed access tokens issued by the auth backend.

    The ``sub`` claim is the user id; ``exp`` is always enforced and
    ``aud`` is checked when an audience is configured.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        audience: Optional[str] = "authenticated"
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._audience = audience

    def verify(self, authorization: Optional[str]) -> AuthenticatedUser:
        """Verify an ``Authorization`` header value.

        Raises:
            MissingCredentialsError: If the header is absent
            InvalidTokenError: If the token is malformed, expired or forged
        """
        if not authorization:
            raise MissingCredentialsError(
                "Authorization header is required",
                error_code="UNAUTHORIZED",
            )

        token = authorization[7:] if authorization.startswith("Bearer ") else authorization
        token = token.strip()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                options={
                    "verify_exp": True,
                    "verify_aud": self._audience is not None,
                    "require": ["exp", "sub"],
                },
            )
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired access token")
            raise InvalidTokenError("Invalid or expired token", error_code="UNAUTHORIZED")
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected access token: {e}")
            raise InvalidTokenError("Invalid or expired token", error_code="UNAUTHORIZED")

        return AuthenticatedUser(
            id=str(payload["sub"]),
            email=payload.get("email"),
            role=payload.get("role"),
            claims=payload,
        )
