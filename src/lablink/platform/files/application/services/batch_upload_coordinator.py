"""Batch upload coordinator.

ONLY batch orchestration - uploads many independent files through a
bounded window of in-flight tasks with per-task failure isolation.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import logging
from typing import List, Optional, Sequence, TypeVar

from .....config.constants import MB
from ...core.entities.upload_task import UploadResult, UploadTask
from ..commands.upload_file import UploadFileCommand

logger = logging.getLogger(__name__)

T = TypeVar("T")


SMALL_FILE_AVERAGE = 1 * MB
LARGE_FILE_AVERAGE = 5 * MB
SMALL_FILE_CONCURRENCY = 5
MEDIUM_FILE_CONCURRENCY = 3
LARGE_FILE_CONCURRENCY = 2
DEFAULT_BATCH_SIZE = 10


def derive_concurrency(tasks: Sequence[UploadTask]) -> int:
    """Pick a concurrency window from the average file size of a batch.

    Averages under 1 MiB run 5 wide, over 5 MiB run 2 wide, anything in
    between runs 3 wide.
    """
    if not tasks:
        return MEDIUM_FILE_CONCURRENCY

    average = sum(task.size for task in tasks) / len(tasks)
    if average < SMALL_FILE_AVERAGE:
        return SMALL_FILE_CONCURRENCY
    if average > LARGE_FILE_AVERAGE:
        return LARGE_FILE_CONCURRENCY
    return MEDIUM_FILE_CONCURRENCY


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """Split a sequence into consecutive lists of at most ``size`` items."""
    if size < 1:
        raise ValueError("Chunk size must be at least 1")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


class BatchUploadCoordinator:
    """Uploads a batch of files with bounded parallelism.

    A counted semaphore is acquired before each task is scheduled and
    released when it settles, so at most ``concurrency`` uploads are ever
    in flight. Results come back in completion order and must be
    correlated by task id. One task failing never aborts its siblings.
    """

    def __init__(self, upload_command: UploadFileCommand):
        self._upload_command = upload_command

    async def upload_batch(
        self,
        tasks: Sequence[UploadTask],
        concurrency: Optional[int] = None
    ) -> List[UploadResult]:
        """Upload every task, at most ``concurrency`` at a time.

        Args:
            tasks: Upload tasks to process
            concurrency: Explicit window size; derived from average file
                size when omitted

        Returns:
            One UploadResult per task, in completion order
        """
        if not tasks:
            return []

        if concurrency is None:
            concurrency = derive_concurrency(tasks)
        if concurrency < 1:
            raise ValueError("Concurrency must be at least 1")

        logger.info(f"Uploading batch of {len(tasks)} files with concurrency {concurrency}")

        semaphore = asyncio.Semaphore(concurrency)
        results: List[UploadResult] = []
        in_flight = []

        for task in tasks:
            await semaphore.acquire()
            in_flight.append(asyncio.create_task(self._run(task, semaphore, results)))

        await asyncio.gather(*in_flight)

        failed = sum(1 for result in results if not result.success)
        if failed:
            logger.warning(f"Batch finished with {failed} of {len(results)} uploads failed")
        return results

    async def upload_in_batches(
        self,
        tasks: Sequence[UploadTask],
        batch_size: int = DEFAULT_BATCH_SIZE,
        concurrency: Optional[int] = None
    ) -> List[UploadResult]:
        """Upload tasks in sequential groups of ``batch_size``.

        Each group runs through the bounded window and must settle before
        the next one starts, which keeps very large collections from
        flooding the backend.
        """
        results: List[UploadResult] = []
        for group in chunk(tasks, batch_size):
            results.extend(await self.upload_batch(group, concurrency))
        return results

    async def _run(
        self,
        task: UploadTask,
        semaphore: asyncio.Semaphore,
        results: List[UploadResult]
    ) -> None:
        try:
            result = await self._upload_command.execute(task)
        except Exception as e:
            logger.error(f"Unexpected upload failure for task {task.id}: {e}")
            result = UploadResult.failed(task.id, str(e))
        finally:
            semaphore.release()
        results.append(result)


def create_batch_upload_coordinator(upload_command: UploadFileCommand) -> BatchUploadCoordinator:
    """Create batch upload coordinator."""
    return BatchUploadCoordinator(upload_command)
