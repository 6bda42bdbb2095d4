"""File platform protocols."""

from .storage_provider import StorageProviderProtocol
from .attachment_repository import AttachmentRepository, AttachmentRecord

__all__ = [
    "StorageProviderProtocol",
    "AttachmentRepository",
    "AttachmentRecord",
]
