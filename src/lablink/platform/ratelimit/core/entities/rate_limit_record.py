"""Rate limit record entity.

ONLY persisted counter state - one row per identifier per window key.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class RateLimitRecord:
    """Counter for one identifier within one window.

    ``endpoint`` is the window-qualified key such as ``create-order_minute``.
    Records are never deleted; they fall out of the active window once
    ``window_start`` is older than the window duration.
    ``expires_at`` is set by stores whose keys expire on their own.
    """

    identifier: str
    endpoint: str
    window_start: datetime
    request_count: int = 1
    id: Optional[str] = None
    expires_at: Optional[datetime] = None
