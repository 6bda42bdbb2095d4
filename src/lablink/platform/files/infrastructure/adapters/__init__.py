"""File platform adapters."""

from .local_storage_provider import LocalStorageProvider, create_local_storage_provider

__all__ = ["LocalStorageProvider", "create_local_storage_provider"]
