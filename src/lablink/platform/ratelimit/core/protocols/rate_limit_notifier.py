"""Rate limit notifier protocol."""

from datetime import datetime
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class RateLimitNotifier(Protocol):
    """Receives a notice whenever a request is rejected."""

    async def notify_exceeded(
        self,
        identifier: str,
        endpoint: str,
        current_count: int,
        max_requests: int,
        retry_after: int,
        timestamp: datetime
    ) -> None:
        ...
