"""Redis implementation of RateLimitStore.

Each (identifier, endpoint) pair is a hash holding ``count``,
``window_start`` and ``expires_at`` that expires once its window can no
longer be active.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from .....core.exceptions import DatabaseError
from ...core.entities.rate_limit_record import RateLimitRecord
from ...core.protocols.rate_limit_store import RateLimitStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("count", "window_start", "expires_at")


class RedisRateLimitStore(RateLimitStore):
    """Rate limit counters kept in Redis hashes."""

    def __init__(self, redis_client: redis.Redis, key_prefix: str = "lablink:rate_limit"):
        self._redis = redis_client
        self._key_prefix = key_prefix

    def _key(self, identifier: str, endpoint: str) -> str:
        return f"{self._key_prefix}:{endpoint}:{identifier}"

    async def find_active(
        self,
        identifier: str,
        endpoint: str,
        since: datetime
    ) -> Optional[RateLimitRecord]:
        try:
            data = await self._redis.hgetall(self._key(identifier, endpoint))
        except RedisError as e:
            logger.error(f"Failed to read rate limit counter: {e}")
            raise DatabaseError(f"Redis rate limit store unavailable: {e}") from e

        values = {_text(key): _text(value) for key, value in data.items()}
        if any(field not in values for field in REQUIRED_FIELDS):
            # Partial hashes are left over from counters that expired mid-update
            if values:
                logger.warning(f"Ignoring incomplete rate limit counter for {identifier} on {endpoint}")
            return None

        try:
            window_start = _from_timestamp(values["window_start"])
            expires_at = _from_timestamp(values["expires_at"])
            request_count = int(values["count"])
        except ValueError:
            logger.warning(f"Ignoring malformed rate limit counter for {identifier} on {endpoint}")
            return None

        if window_start <= since:
            return None

        return RateLimitRecord(
            identifier=identifier,
            endpoint=endpoint,
            window_start=window_start,
            request_count=request_count,
            expires_at=expires_at,
        )

    async def increment(self, record: RateLimitRecord) -> RateLimitRecord:
        """Bump the counter and pin the key to the record's expiry.

        If the key expired since it was read, the increment recreates it;
        restoring ``window_start`` and the expiry in the same transaction
        keeps the new hash complete and short-lived.
        """
        if record.expires_at is None:
            raise ValueError("Redis rate limit records require expires_at")

        key = self._key(record.identifier, record.endpoint)
        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.hincrby(key, "count", 1)
                pipe.hsetnx(key, "window_start", record.window_start.timestamp())
                pipe.hsetnx(key, "expires_at", record.expires_at.timestamp())
                pipe.expireat(key, record.expires_at)
                results = await pipe.execute()
        except RedisError as e:
            logger.error(f"Failed to increment rate limit counter: {e}")
            raise DatabaseError(f"Redis rate limit store unavailable: {e}") from e

        return RateLimitRecord(
            identifier=record.identifier,
            endpoint=record.endpoint,
            window_start=record.window_start,
            request_count=int(results[0]),
            expires_at=record.expires_at,
        )

    async def create(
        self,
        identifier: str,
        endpoint: str,
        window_start: datetime,
        window: timedelta
    ) -> RateLimitRecord:
        key = self._key(identifier, endpoint)
        expires_at = window_start + max(window, timedelta(seconds=1))
        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.hset(
                    key,
                    mapping={
                        "count": 1,
                        "window_start": window_start.timestamp(),
                        "expires_at": expires_at.timestamp(),
                    },
                )
                pipe.expireat(key, expires_at)
                await pipe.execute()
        except RedisError as e:
            logger.error(f"Failed to create rate limit counter: {e}")
            raise DatabaseError(f"Redis rate limit store unavailable: {e}") from e

        return RateLimitRecord(
            identifier=identifier,
            endpoint=endpoint,
            window_start=window_start,
            request_count=1,
            expires_at=expires_at,
        )


def _text(value) -> str:
    return value.decode() if isinstance(value, bytes) else str(value)


def _from_timestamp(value: str) -> datetime:
    return datetime.fromtimestamp(float(value), tz=timezone.utc)


def create_redis_rate_limit_store(redis_url: str) -> RedisRateLimitStore:
    """Create a Redis store from a connection URL."""
    return RedisRateLimitStore(redis.from_url(redis_url))
