"""Rate limit store protocol.

ONLY counter persistence contract - lookup, increment and creation of
window records.
"""

from datetime import datetime, timedelta
from typing import Optional
from typing_extensions import Protocol, runtime_checkable

from ..entities.rate_limit_record import RateLimitRecord


@runtime_checkable
class RateLimitStore(Protocol):
    """Backend holding rate limit counters.

    Implementations raise ``DatabaseError`` when the backend fails.
    """

    async def find_active(
        self,
        identifier: str,
        endpoint: str,
        since: datetime
    ) -> Optional[RateLimitRecord]:
        """Return the newest record whose window started after ``since``."""
        ...

    async def increment(self, record: RateLimitRecord) -> RateLimitRecord:
        """Add one request to an existing record and return the updated record."""
        ...

    async def create(
        self,
        identifier: str,
        endpoint: str,
        window_start: datetime,
        window: timedelta
    ) -> RateLimitRecord:
        """Open a new window with a count of one.

        ``window`` lets stores with native expiry drop the record once it
        can no longer be active.
        """
        ...
