"""Local filesystem storage provider.

ONLY local object storage - each bucket is a directory under a root path
and object paths map to files beneath it.
"""

import logging
from pathlib import PurePosixPath
from typing import Iterable, List, Optional

import anyio
from aiofile import async_open

from .....core.exceptions import (
    ObjectAlreadyExistsError,
    StorageDeleteError,
    StorageError,
    StorageUploadError,
)
from ...core.protocols.storage_provider import StorageProviderProtocol

logger = logging.getLogger(__name__)


class LocalStorageProvider(StorageProviderProtocol):
    """Bucketed object storage on the local filesystem."""

    def __init__(self, root: str):
        self.root = anyio.Path(root)

    def _object_path(self, bucket: str, path: str) -> anyio.Path:
        """Map a bucket/path pair to a file, refusing anything outside the bucket."""
        bucket_parts = PurePosixPath(bucket).parts
        if len(bucket_parts) != 1 or bucket_parts[0] in (".", "..", "/"):
            raise StorageError(f"Invalid bucket name: {bucket!r}")

        object_path = PurePosixPath(path.replace("\\", "/"))
        if (
            not path
            or object_path.is_absolute()
            or any(part in ("..", ".") for part in object_path.parts)
        ):
            raise StorageError(f"Invalid object path: {path!r}")

        return self.root / bucket / object_path

    async def upload(
        self,
        bucket: str,
        path: str,
        content: bytes,
        content_type: Optional[str] = None,
        upsert: bool = False
    ) -> str:
        """Write ``content`` to ``bucket/path``."""
        target = self._object_path(bucket, path)

        if not upsert and await target.exists():
            raise ObjectAlreadyExistsError(
                f"Object already exists: {bucket}/{path}",
                details={"bucket": bucket, "path": path},
            )

        try:
            await target.parent.mkdir(parents=True, exist_ok=True)
            async with async_open(str(target), "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error(f"Error saving {bucket}/{path}: {e}")
            raise StorageUploadError(f"Failed to store {bucket}/{path}: {e}") from e

        logger.debug(f"Stored {len(content)} bytes at {bucket}/{path} ({content_type})")
        return path

    async def download(self, bucket: str, path: str) -> Optional[bytes]:
        """Read an object, returning None when it does not exist."""
        target = self._object_path(bucket, path)
        if not await target.is_file():
            return None
        async with async_open(str(target), "rb") as f:
            return await f.read()

    async def remove(self, bucket: str, paths: Iterable[str]) -> List[str]:
        """Remove objects and return the paths that were deleted."""
        removed: List[str] = []
        for path in paths:
            target = self._object_path(bucket, path)
            if not await target.exists():
                logger.warning(f"Attempted to delete non-existent object {bucket}/{path}")
                continue
            try:
                await target.unlink()
            except OSError as e:
                raise StorageDeleteError(f"Failed to delete {bucket}/{path}: {e}") from e
            removed.append(path)
        return removed

    async def exists(self, bucket: str, path: str) -> bool:
        return await self._object_path(bucket, path).is_file()


def create_local_storage_provider(root: str) -> LocalStorageProvider:
    """Create local storage provider rooted at ``root``."""
    return LocalStorageProvider(root)
