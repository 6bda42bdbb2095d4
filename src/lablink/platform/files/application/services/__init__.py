"""File platform services."""

from .batch_upload_coordinator import (
    BatchUploadCoordinator,
    chunk,
    create_batch_upload_coordinator,
    derive_concurrency,
)

__all__ = [
    "BatchUploadCoordinator",
    "chunk",
    "create_batch_upload_coordinator",
    "derive_concurrency",
]
