"""File platform validators."""

from .file_integrity_validator import (
    FileIntegrityValidator,
    FileIntegrityValidatorConfig,
    create_client_file_validator,
    create_server_file_validator,
)
from .model_file_validator import (
    ModelFileValidator,
    ModelFileType,
    ModelMetadata,
    ModelValidationResult,
)

__all__ = [
    "FileIntegrityValidator",
    "FileIntegrityValidatorConfig",
    "create_client_file_validator",
    "create_server_file_validator",
    "ModelFileValidator",
    "ModelFileType",
    "ModelMetadata",
    "ModelValidationResult",
]
