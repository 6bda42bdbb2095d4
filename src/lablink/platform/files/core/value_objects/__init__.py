"""File platform value objects."""

from .validation_result import ValidationResult, FileMetadata
from .file_signature import (
    FILE_SIGNATURES,
    FileSignature,
    SignaturePart,
    WINDOWS_EXECUTABLE_MAGIC,
    ELF_EXECUTABLE_MAGIC,
    matches_declared_type,
    detect_mime_type,
)

__all__ = [
    "ValidationResult",
    "FileMetadata",
    "FILE_SIGNATURES",
    "FileSignature",
    "SignaturePart",
    "WINDOWS_EXECUTABLE_MAGIC",
    "ELF_EXECUTABLE_MAGIC",
    "matches_declared_type",
    "detect_mime_type",
]
