"""File platform entities."""

from .upload_task import UploadTask, UploadResult, UploadStage, ProgressCallback

__all__ = [
    "UploadTask",
    "UploadResult",
    "UploadStage",
    "ProgressCallback",
]
