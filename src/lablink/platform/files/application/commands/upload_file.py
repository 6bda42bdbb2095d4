"""Upload file command.

ONLY single-file upload - two-phase storage write plus metadata insert
with a compensating delete when the metadata phase fails.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import logging
from typing import Optional

from .....config.constants import ORDER_ATTACHMENTS_BUCKET
from ...core.entities.upload_task import UploadResult, UploadStage, UploadTask
from ...core.protocols.attachment_repository import AttachmentRecord, AttachmentRepository
from ...core.protocols.storage_provider import StorageProviderProtocol
from ..validators.file_integrity_validator import FileIntegrityValidator

logger = logging.getLogger(__name__)


# Synthesized progress: jumps of PROGRESS_STEP every tick up to PROGRESS_CEILING
# while the storage write runs, then fixed values after each phase.
PROGRESS_STEP = 15
PROGRESS_CEILING = 90
PROGRESS_STORED = 95
PROGRESS_DONE = 100


class UploadFileCommand:
    """Command to upload one attachment.

    Never raises for upload failures: every outcome is reported as an
    UploadResult so a batch can isolate failures per task.
    """

    def __init__(
        self,
        storage: StorageProviderProtocol,
        repository: AttachmentRepository,
        bucket: str = ORDER_ATTACHMENTS_BUCKET,
        progress_interval: float = 0.15,
        validator: Optional[FileIntegrityValidator] = None
    ):
        """Initialize upload file command.

        Args:
            storage: Object storage holding the attachment bytes
            repository: Repository for attachment metadata rows
            bucket: Target bucket name
            progress_interval: Seconds between synthesized progress ticks
            validator: Optional pre-check run before any transfer
        """
        self._storage = storage
        self._repository = repository
        self._bucket = bucket
        self._progress_interval = progress_interval
        self._validator = validator

    async def execute(self, task: UploadTask) -> UploadResult:
        """Execute the upload for a single task.

        Args:
            task: Upload task to process

        Returns:
            Success result with the storage path, or a failure result naming
            the stage that failed
        """
        if self._validator is not None:
            validation = self._validator.validate(task.content, task.filename, task.content_type)
            if not validation.valid:
                return UploadResult.failed(
                    task.id,
                    "; ".join(validation.errors),
                    stage=UploadStage.VALIDATION,
                )

        path = task.storage_path

        ticker = asyncio.create_task(self._tick_progress(task))
        try:
            await self._storage.upload(self._bucket, path, task.content, task.content_type)
        except Exception as e:
            logger.warning(f"Storage upload failed for task {task.id}: {e}")
            return UploadResult.failed(
                task.id,
                f"Storage upload failed: {e}",
                stage=UploadStage.STORAGE,
            )
        finally:
            ticker.cancel()

        self._report_progress(task, PROGRESS_STORED)

        record = AttachmentRecord(
            order_id=task.order_id,
            uploaded_by=task.user_id,
            file_name=task.filename,
            file_path=path,
            file_type=task.content_type,
            file_size=task.size,
            attachment_category=task.category,
        )

        try:
            await self._repository.insert_attachment(record)
        except Exception as e:
            logger.error(f"Metadata insert failed for task {task.id}, rolling back {path}: {e}")
            message = f"Database insert failed: {e}"
            rollback_error = await self._rollback(path)
            if rollback_error:
                message = f"{message} (rollback failed: {rollback_error})"
            return UploadResult.failed(task.id, message, stage=UploadStage.METADATA)

        self._report_progress(task, PROGRESS_DONE)
        logger.debug(f"Uploaded task {task.id} to {self._bucket}/{path}")
        return UploadResult.succeeded(task.id, path)

    async def _rollback(self, path: str) -> Optional[str]:
        """Delete an uploaded object, returning the error text on failure."""
        try:
            await self._storage.remove(self._bucket, [path])
        except Exception as e:
            logger.error(f"Rollback delete failed for {self._bucket}/{path}: {e}")
            return str(e)
        return None

    async def _tick_progress(self, task: UploadTask) -> None:
        progress = 0
        while progress < PROGRESS_CEILING:
            await asyncio.sleep(self._progress_interval)
            progress += PROGRESS_STEP
            self._report_progress(task, progress)

    def _report_progress(self, task: UploadTask, progress: int) -> None:
        if task.on_progress is None:
            return
        try:
            task.on_progress(progress)
        except Exception as e:
            logger.warning(f"Progress callback failed for task {task.id}: {e}")


def create_upload_file_command(
    storage: StorageProviderProtocol,
    repository: AttachmentRepository,
    bucket: str = ORDER_ATTACHMENTS_BUCKET,
    progress_interval: float = 0.15,
    validator: Optional[FileIntegrityValidator] = None
) -> UploadFileCommand:
    """Create upload file command."""
    return UploadFileCommand(
        storage=storage,
        repository=repository,
        bucket=bucket,
        progress_interval=progress_interval,
        validator=validator,
    )
