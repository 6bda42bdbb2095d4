"""Rate limit decision value object."""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of a rate limit check.

    For rejected requests ``window`` names the exhausted window and
    ``retry_after`` is the whole number of seconds until ``reset_at``.
    """

    allowed: bool
    limit: int
    remaining: int
    reset_at: datetime
    retry_after: Optional[int] = None
    window: Optional[str] = None
    message: Optional[str] = None

    def headers(self) -> Dict[str, str]:
        """Standard ``X-RateLimit-*`` response headers."""
        headers = {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(max(self.remaining, 0)),
            "X-RateLimit-Reset": str(int(self.reset_at.timestamp())),
        }
        if self.retry_after is not None:
            headers["Retry-After"] = str(self.retry_after)
        return headers
