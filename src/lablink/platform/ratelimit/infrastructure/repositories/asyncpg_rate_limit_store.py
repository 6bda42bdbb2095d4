"""AsyncPG implementation of RateLimitStore."""

import logging
from datetime import datetime, timedelta
from typing import Optional

import asyncpg

from .....core.exceptions import QueryError
from .....database.connection import DatabaseManager
from ...core.entities.rate_limit_record import RateLimitRecord
from ...core.protocols.rate_limit_store import RateLimitStore
from ..queries import RATE_LIMIT_FIND_ACTIVE, RATE_LIMIT_INCREMENT, RATE_LIMIT_INSERT

logger = logging.getLogger(__name__)


class AsyncPGRateLimitStore(RateLimitStore):
    """Rate limit counters stored as rows in ``rate_limits``."""

    def __init__(self, database: DatabaseManager):
        self.database = database

    async def find_active(
        self,
        identifier: str,
        endpoint: str,
        since: datetime
    ) -> Optional[RateLimitRecord]:
        row = await self._fetchrow(RATE_LIMIT_FIND_ACTIVE, identifier, endpoint, since)
        return self._row_to_record(row) if row else None

    async def increment(self, record: RateLimitRecord) -> RateLimitRecord:
        row = await self._fetchrow(RATE_LIMIT_INCREMENT, record.id)
        if row is None:
            raise QueryError(
                f"Rate limit record {record.id} disappeared before increment",
                details={"endpoint": record.endpoint},
            )
        return self._row_to_record(row)

    async def create(
        self,
        identifier: str,
        endpoint: str,
        window_start: datetime,
        window: timedelta
    ) -> RateLimitRecord:
        row = await self._fetchrow(RATE_LIMIT_INSERT, identifier, endpoint, window_start)
        return self._row_to_record(row)

    async def _fetchrow(self, query: str, *args):
        try:
            async with self.database.acquire() as conn:
                return await conn.fetchrow(query, *args)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error(f"Rate limit query failed: {e}")
            raise QueryError(f"Rate limit store unavailable: {e}") from e

    def _row_to_record(self, row) -> RateLimitRecord:
        return RateLimitRecord(
            id=str(row["id"]),
            identifier=row["identifier"],
            endpoint=row["endpoint"],
            window_start=row["window_start"],
            request_count=row["request_count"],
        )
