"""Base exceptions for lablink.

All exceptions inherit from LabLinkError and carry an error code and
structured details used when rendering API error responses.
"""

from typing import Any, Dict, Optional


class LabLinkError(Exception):
    """Base exception for all lablink errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: LabLinkError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The lablink exception

    Returns:
        Error response dictionary
    """
    return {
        "error": exception.message,
        "code": exception.error_code,
        "details": exception.details,
    }
