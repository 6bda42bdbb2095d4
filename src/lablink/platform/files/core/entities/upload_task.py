"""Upload task and result entities.

ONLY upload units of work - the transient task handed to the batch
coordinator and the outcome record produced for it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional
from uuid import uuid4


ProgressCallback = Callable[[int], None]


class UploadStage(str, Enum):
    """Stage of the upload pipeline where a task failed."""
    VALIDATION = "validation"
    STORAGE = "storage"
    METADATA = "metadata"


@dataclass
class UploadTask:
    """Transient unit of work for a single attachment upload.

    Created when a user selects files and discarded once the coordinator
    reports a terminal result for it.
    """

    id: str
    content: bytes
    filename: str
    content_type: str
    order_id: str
    user_id: str
    category: str = "general"
    on_progress: Optional[ProgressCallback] = field(default=None, repr=False, compare=False)

    @classmethod
    def create(
        cls,
        content: bytes,
        filename: str,
        content_type: str,
        order_id: str,
        user_id: str,
        category: str = "general",
        on_progress: Optional[ProgressCallback] = None
    ) -> "UploadTask":
        """Create a task keyed by a fresh random identifier.

        Every attempt gets a new id so a resubmitted task never collides
        with objects left behind by an earlier attempt.
        """
        return cls(
            id=str(uuid4()),
            content=content,
            filename=filename,
            content_type=content_type,
            order_id=order_id,
            user_id=user_id,
            category=category,
            on_progress=on_progress,
        )

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def storage_path(self) -> str:
        """Object path inside the attachments bucket."""
        return f"{self.user_id}/{self.order_id}/{self.id}-{self.filename}"


@dataclass
class UploadResult:
    """Outcome of one upload task."""

    id: str
    success: bool
    file_path: Optional[str] = None
    error: Optional[str] = None
    failed_stage: Optional[UploadStage] = None

    @classmethod
    def succeeded(cls, task_id: str, file_path: str) -> "UploadResult":
        return cls(id=task_id, success=True, file_path=file_path)

    @classmethod
    def failed(
        cls,
        task_id: str,
        error: str,
        stage: Optional[UploadStage] = None
    ) -> "UploadResult":
        return cls(id=task_id, success=False, error=error, failed_stage=stage)
