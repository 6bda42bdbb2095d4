"""Input validation and sanitizing helpers for lablink."""

import re
import uuid
from typing import Optional


UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid_uuid(value: str, version: Optional[int] = None) -> bool:
    """
    Check if string is a canonical hyphenated UUID.

    Args:
        value: String to validate
        version: Optional specific version to check (4, 7, etc.)

    Returns:
        True if valid UUID, False otherwise
    """
    if not isinstance(value, str) or not UUID_PATTERN.match(value):
        return False

    if version is not None:
        return uuid.UUID(value).version == version

    return True


def sanitize_input(text: str, max_length: int = 1000) -> str:
    """Strip, truncate to ``max_length`` and drop angle brackets."""
    return text.strip()[:max_length].replace("<", "").replace(">", "")
