"""Rate limiting platform.

Rolling minute and hour windows over persisted counters.
"""

from .application.services import RateLimiter, create_rate_limiter
from .core.entities import RateLimitRecord
from .core.protocols import RateLimitNotifier, RateLimitStore
from .core.value_objects import RateLimitDecision, RateLimitWindow

__all__ = [
    "RateLimiter",
    "create_rate_limiter",
    "RateLimitRecord",
    "RateLimitNotifier",
    "RateLimitStore",
    "RateLimitDecision",
    "RateLimitWindow",
]
