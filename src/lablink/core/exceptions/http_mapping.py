"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import LabLinkError
from .domain import *


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,
    InvalidOrderError: 400,

    # 401 Unauthorized
    AuthenticationError: 401,
    MissingCredentialsError: 401,
    InvalidTokenError: 401,

    # 429 Too Many Requests
    RateLimitError: 429,
    RateLimitExceededError: 429,

    # 500 Internal Server Error
    ConfigurationError: 500,
    DatabaseError: 500,
    ConnectionPoolError: 500,
    QueryError: 500,
    StorageError: 500,
    StorageUploadError: 500,
    StorageDeleteError: 500,
    ObjectAlreadyExistsError: 500,

    # Default for LabLinkError
    LabLinkError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Walks the exception's MRO so subclasses without an explicit entry
    inherit their parent's status code.
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
