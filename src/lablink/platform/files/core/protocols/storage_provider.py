"""Storage provider protocol.

ONLY object storage contract - bucketed upload, download and removal
keyed by object path.
"""

from typing import Iterable, List, Optional
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class StorageProviderProtocol(Protocol):
    """Object storage backend.

    Implementations raise ``StorageUploadError`` / ``StorageDeleteError``
    on failure rather than returning status flags.
    """

    async def upload(
        self,
        bucket: str,
        path: str,
        content: bytes,
        content_type: Optional[str] = None,
        upsert: bool = False
    ) -> str:
        """Store ``content`` at ``path`` inside ``bucket``.

        Returns:
            The stored object path

        Raises:
            ObjectAlreadyExistsError: If the object exists and ``upsert`` is False
            StorageUploadError: If the write fails
        """
        ...

    async def download(self, bucket: str, path: str) -> Optional[bytes]:
        """Return object content, or None if the object does not exist."""
        ...

    async def remove(self, bucket: str, paths: Iterable[str]) -> List[str]:
        """Remove objects, returning the paths that existed and were removed."""
        ...

    async def exists(self, bucket: str, path: str) -> bool:
        """Check whether an object exists."""
        ...
