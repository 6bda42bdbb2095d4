"""File platform repositories."""

from .asyncpg_attachment_repository import AsyncPGAttachmentRepository

__all__ = ["AsyncPGAttachmentRepository"]
