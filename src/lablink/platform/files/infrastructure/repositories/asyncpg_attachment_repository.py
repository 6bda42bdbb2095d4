"""AsyncPG implementation of AttachmentRepository."""

import logging
from typing import Any, Dict

import asyncpg

from .....core.exceptions import QueryError
from .....database.connection import DatabaseManager
from ...core.protocols.attachment_repository import AttachmentRecord, AttachmentRepository
from ..queries import ATTACHMENT_INSERT

logger = logging.getLogger(__name__)


class AsyncPGAttachmentRepository(AttachmentRepository):
    """PostgreSQL persistence for ``order_attachments`` rows."""

    def __init__(self, database: DatabaseManager):
        self.database = database

    async def insert_attachment(self, record: AttachmentRecord) -> Dict[str, Any]:
        """Insert attachment metadata and return the stored row."""
        try:
            async with self.database.acquire() as conn:
                row = await conn.fetchrow(
                    ATTACHMENT_INSERT,
                    record.order_id,
                    record.uploaded_by,
                    record.file_name,
                    record.file_path,
                    record.file_type,
                    record.file_size,
                    record.attachment_category,
                )
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error(f"Failed to insert attachment {record.file_path}: {e}")
            raise QueryError(str(e)) from e

        return dict(row)
