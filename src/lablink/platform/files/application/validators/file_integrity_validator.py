"""File integrity validator.

ONLY upload integrity validation - size bounds, MIME allow-list,
magic byte verification, executable/script scanning and filename hygiene.

Two profiles exist: the strict server gate and the lighter client
pre-check, which also accepts 3D model files and validates them
structurally instead of by byte signature.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from .....config.constants import (
    CLIENT_ALLOWED_MIME_TYPES,
    CLIENT_MAX_FILE_SIZE,
    MAX_FILENAME_LENGTH,
    MB,
    MIN_FILE_SIZE,
    MODEL_EXTENSIONS,
    MODEL_MIME_TYPES,
    SCAN_WINDOW_BYTES,
    SERVER_ALLOWED_MIME_TYPES,
    SERVER_MAX_FILE_SIZE,
)
from ...core.value_objects.file_signature import (
    ELF_EXECUTABLE_MAGIC,
    WINDOWS_EXECUTABLE_MAGIC,
    detect_mime_type,
    matches_declared_type,
)
from ...core.value_objects.validation_result import FileMetadata, ValidationResult
from .model_file_validator import ModelFileValidator

logger = logging.getLogger(__name__)


SUSPICIOUS_EXTENSION_PATTERN = re.compile(r"\.(exe|dll|scr|bat|cmd|com|pif|vbs|js)$", re.IGNORECASE)
INVALID_FILENAME_CHARACTERS = re.compile(r'[<>:"|?*]')


@dataclass(frozen=True)
class FileIntegrityValidatorConfig:
    """Limits and allow-list for one validation profile."""

    max_size: int = SERVER_MAX_FILE_SIZE
    min_size: int = MIN_FILE_SIZE
    allowed_mime_types: FrozenSet[str] = field(default=SERVER_ALLOWED_MIME_TYPES)
    scan_window: int = SCAN_WINDOW_BYTES
    max_filename_length: int = MAX_FILENAME_LENGTH
    validate_models: bool = False

    @classmethod
    def server(cls, max_size: int = SERVER_MAX_FILE_SIZE) -> "FileIntegrityValidatorConfig":
        """Strict gate used by the upload endpoint."""
        return cls(max_size=max_size, allowed_mime_types=SERVER_ALLOWED_MIME_TYPES)

    @classmethod
    def client(cls, max_size: int = CLIENT_MAX_FILE_SIZE) -> "FileIntegrityValidatorConfig":
        """Pre-check run before files are handed to the batch coordinator."""
        return cls(
            max_size=max_size,
            allowed_mime_types=CLIENT_ALLOWED_MIME_TYPES,
            validate_models=True,
        )


class FileIntegrityValidator:
    """Decides whether a candidate upload is safe and correctly typed.

    All checks run and their errors accumulate; the result is valid only
    when no hard check failed. Warnings never affect validity.
    """

    def __init__(
        self,
        config: Optional[FileIntegrityValidatorConfig] = None,
        model_validator: Optional[ModelFileValidator] = None
    ):
        self.config = config or FileIntegrityValidatorConfig.server()
        self._model_validator = model_validator or ModelFileValidator()

    def validate(self, content: bytes, filename: str, mime_type: str) -> ValidationResult:
        """Validate a file buffer against its declared name and type.

        Args:
            content: Raw file bytes
            filename: Declared filename
            mime_type: Declared MIME type

        Returns:
            ValidationResult with hard errors, warnings and file metadata
        """
        errors: List[str] = []
        warnings: List[str] = []
        detected_type = detect_mime_type(content)

        self._check_size(content, errors)

        if mime_type not in self.config.allowed_mime_types:
            errors.append(f"File type {mime_type} is not allowed")

        if self._is_model_upload(filename, mime_type):
            model_result = self._model_validator.validate(filename, content)
            errors.extend(model_result.errors)
            warnings.extend(model_result.warnings)
            if model_result.valid:
                detected_type = mime_type
        elif not matches_declared_type(content, mime_type):
            errors.append(
                "File signature does not match declared MIME type - possible file type spoofing"
            )

        self._check_filename(filename, errors, warnings)
        errors.extend(self.scan_for_threats(content))

        if errors:
            logger.debug(f"File {filename!r} ({mime_type}) failed validation: {errors}")

        return ValidationResult(
            metadata=FileMetadata(
                file_size=len(content),
                file_name=filename,
                detected_type=detected_type,
            ),
            errors=errors,
            warnings=warnings,
        )

    def scan_for_threats(self, content: bytes) -> List[str]:
        """Scan leading bytes for executable headers and script injection."""
        threats: List[str] = []

        if content.startswith(WINDOWS_EXECUTABLE_MAGIC):
            threats.append("Windows executable signature detected")
        if content.startswith(ELF_EXECUTABLE_MAGIC):
            threats.append("Linux/Unix executable signature detected")

        text = content[:self.config.scan_window].decode("utf-8", errors="replace").lower()
        if "<script" in text:
            threats.append("Script tag detected - potential XSS attack")
        if "javascript:" in text:
            threats.append("JavaScript URL scheme detected")
        if "onerror=" in text or "onload=" in text:
            threats.append("Suspicious event handler detected")

        return threats

    def _check_size(self, content: bytes, errors: List[str]) -> None:
        size = len(content)
        if size > self.config.max_size:
            limit = self.config.max_size / MB
            limit_text = f"{limit:g}"
            errors.append(f"File size exceeds maximum allowed size of {limit_text}MB")
        if size < self.config.min_size:
            errors.append("File is suspiciously small")

    def _check_filename(self, filename: str, errors: List[str], warnings: List[str]) -> None:
        if len(filename) > self.config.max_filename_length:
            warnings.append("Filename is very long")
        if SUSPICIOUS_EXTENSION_PATTERN.search(filename):
            errors.append("Suspicious file extension detected")
        if ".." in filename:
            errors.append("Path traversal attempt detected in filename")
        if INVALID_FILENAME_CHARACTERS.search(filename):
            errors.append("Invalid characters in filename")

    def _is_model_upload(self, filename: str, mime_type: str) -> bool:
        if not self.config.validate_models or mime_type not in MODEL_MIME_TYPES:
            return False
        extension = filename.lower().rsplit(".", 1)[-1] if "." in filename else ""
        return extension in MODEL_EXTENSIONS


# Factory functions for dependency injection
def create_server_file_validator(max_size: int = SERVER_MAX_FILE_SIZE) -> FileIntegrityValidator:
    """Create the strict server-side validator."""
    return FileIntegrityValidator(FileIntegrityValidatorConfig.server(max_size=max_size))


def create_client_file_validator(max_size: int = CLIENT_MAX_FILE_SIZE) -> FileIntegrityValidator:
    """Create the client pre-check validator with model file support."""
    return FileIntegrityValidator(FileIntegrityValidatorConfig.client(max_size=max_size))
