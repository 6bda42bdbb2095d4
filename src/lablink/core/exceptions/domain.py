"""Domain and infrastructure exceptions for lablink."""

from datetime import datetime
from typing import Any, Dict, Optional

from .base import LabLinkError


# Configuration Errors
class ConfigurationError(LabLinkError):
    """Raised when configuration is invalid or missing."""
    pass


# Validation Errors
class ValidationError(LabLinkError):
    """Raised when client input violates a stated constraint."""

    def __init__(
        self,
        message: str,
        errors: Optional[list] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code=error_code, details=details)
        self.errors = list(errors or [])


class InvalidOrderError(ValidationError):
    """Raised when an order payload fails validation."""
    pass


# Authentication Errors
class AuthenticationError(LabLinkError):
    """Base class for authentication-related errors."""
    pass


class MissingCredentialsError(AuthenticationError):
    """Raised when the Authorization header is absent."""
    pass


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is invalid or expired."""
    pass


# Rate Limit Errors
class RateLimitError(LabLinkError):
    """Base class for rate limiting errors."""
    pass


class RateLimitExceededError(RateLimitError):
    """Raised when an identifier has exhausted a rate limit window."""

    def __init__(
        self,
        message: str,
        reset_at: datetime,
        retry_after: int,
        limit: int,
        remaining: int = 0,
        window: Optional[str] = None
    ):
        super().__init__(
            message,
            error_code="RATE_LIMIT_EXCEEDED",
            details={
                "reset_at": reset_at.isoformat(),
                "retry_after": retry_after,
                "limit": limit,
                "remaining": remaining,
                "window": window,
            }
        )
        self.reset_at = reset_at
        self.retry_after = retry_after
        self.limit = limit
        self.remaining = remaining
        self.window = window


# Database Errors
class DatabaseError(LabLinkError):
    """Base class for database-related errors."""
    pass


class ConnectionPoolError(DatabaseError):
    """Raised when the connection pool cannot be created or used."""
    pass


class QueryError(DatabaseError):
    """Raised when a query against the relational store fails."""
    pass


# Storage Errors
class StorageError(LabLinkError):
    """Base class for object storage errors."""
    pass


class StorageUploadError(StorageError):
    """Raised when writing an object to a bucket fails."""
    pass


class StorageDeleteError(StorageError):
    """Raised when removing an object from a bucket fails."""
    pass


class ObjectAlreadyExistsError(StorageUploadError):
    """Raised when an upload would overwrite an existing object."""
    pass
