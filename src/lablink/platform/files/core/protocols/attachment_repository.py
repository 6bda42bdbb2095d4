"""Attachment repository protocol.

ONLY attachment metadata persistence contract.
"""

from dataclasses import dataclass
from typing import Any, Dict
from typing_extensions import Protocol, runtime_checkable


@dataclass(frozen=True)
class AttachmentRecord:
    """Metadata row describing a stored order attachment."""

    order_id: str
    uploaded_by: str
    file_name: str
    file_path: str
    file_type: str
    file_size: int
    attachment_category: str


@runtime_checkable
class AttachmentRepository(Protocol):
    """Persistence for ``order_attachments`` rows."""

    async def insert_attachment(self, record: AttachmentRecord) -> Dict[str, Any]:
        """Insert attachment metadata and return the stored row.

        Raises:
            DatabaseError: If the insert fails
        """
        ...
