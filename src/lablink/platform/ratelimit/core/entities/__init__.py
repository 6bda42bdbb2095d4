"""Rate limit entities."""

from .rate_limit_record import RateLimitRecord

__all__ = ["RateLimitRecord"]
