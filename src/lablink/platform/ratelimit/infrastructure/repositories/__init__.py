"""Rate limit store implementations."""

from .asyncpg_rate_limit_store import AsyncPGRateLimitStore
from .redis_rate_limit_store import RedisRateLimitStore, create_redis_rate_limit_store

__all__ = [
    "AsyncPGRateLimitStore",
    "RedisRateLimitStore",
    "create_redis_rate_limit_store",
]
