"""Exceptions for lablink."""

from .base import LabLinkError, create_error_response
from .domain import (
    ConfigurationError,
    ValidationError,
    InvalidOrderError,
    AuthenticationError,
    MissingCredentialsError,
    InvalidTokenError,
    RateLimitError,
    RateLimitExceededError,
    DatabaseError,
    ConnectionPoolError,
    QueryError,
    StorageError,
    StorageUploadError,
    StorageDeleteError,
    ObjectAlreadyExistsError,
)
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "LabLinkError",
    "create_error_response",
    "ConfigurationError",
    "ValidationError",
    "InvalidOrderError",
    "AuthenticationError",
    "MissingCredentialsError",
    "InvalidTokenError",
    "RateLimitError",
    "RateLimitExceededError",
    "DatabaseError",
    "ConnectionPoolError",
    "QueryError",
    "StorageError",
    "StorageUploadError",
    "StorageDeleteError",
    "ObjectAlreadyExistsError",
    "HTTP_STATUS_MAP",
    "get_http_status_code",
]
