"""Rate limit protocols."""

from .rate_limit_store import RateLimitStore
from .rate_limit_notifier import RateLimitNotifier

__all__ = ["RateLimitStore", "RateLimitNotifier"]
