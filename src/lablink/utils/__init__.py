"""Utilities module for lablink."""

from .validation import UUID_PATTERN, is_valid_uuid, sanitize_input

__all__ = [
    "UUID_PATTERN",
    "is_valid_uuid",
    "sanitize_input",
]
