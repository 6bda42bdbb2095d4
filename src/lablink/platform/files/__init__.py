"""File upload platform.

Integrity validation, two-phase attachment upload and bounded-concurrency
batch coordination.
"""

from .application.commands import UploadFileCommand, create_upload_file_command
from .application.services import BatchUploadCoordinator, create_batch_upload_coordinator
from .application.validators import (
    FileIntegrityValidator,
    FileIntegrityValidatorConfig,
    ModelFileValidator,
    create_client_file_validator,
    create_server_file_validator,
)
from .core.entities import UploadResult, UploadStage, UploadTask
from .core.value_objects import FileMetadata, ValidationResult

__all__ = [
    "UploadFileCommand",
    "create_upload_file_command",
    "BatchUploadCoordinator",
    "create_batch_upload_coordinator",
    "FileIntegrityValidator",
    "FileIntegrityValidatorConfig",
    "ModelFileValidator",
    "create_client_file_validator",
    "create_server_file_validator",
    "UploadResult",
    "UploadStage",
    "UploadTask",
    "FileMetadata",
    "ValidationResult",
]
