"""Rate limiter service.

ONLY request admission - caps requests per identity within rolling
minute and hour windows backed by persisted counters.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Tuple

from .....core.exceptions import DatabaseError, RateLimitExceededError
from ...core.entities.rate_limit_record import RateLimitRecord
from ...core.protocols.rate_limit_notifier import RateLimitNotifier
from ...core.protocols.rate_limit_store import RateLimitStore
from ...core.value_objects.rate_limit_decision import RateLimitDecision
from ...core.value_objects.rate_limit_window import RateLimitWindow

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RateLimiter:
    """Rolling-window rate limiter.

    Windows are checked in order; the first exhausted window rejects the
    request. Only when every window has room are all counters bumped.

    The lookup and the increment are separate store calls, so two
    concurrent requests from one identifier can both pass a window that
    has a single slot left.
    """

    def __init__(
        self,
        store: RateLimitStore,
        windows: Optional[Sequence[RateLimitWindow]] = None,
        notifier: Optional[RateLimitNotifier] = None,
        fail_open: bool = False,
        clock: Callable[[], datetime] = utc_now
    ):
        """Initialize rate limiter.

        Args:
            store: Counter backend
            windows: Windows to enforce, defaults to 10/minute and 50/hour
            notifier: Optional receiver for rejection notices
            fail_open: Allow requests when the store fails instead of raising
            clock: Source of the current UTC time
        """
        self._store = store
        self._windows: List[RateLimitWindow] = list(
            windows or (RateLimitWindow.minute(), RateLimitWindow.hour())
        )
        if not self._windows:
            raise ValueError("At least one rate limit window is required")
        self._notifier = notifier
        self._fail_open = fail_open
        self._clock = clock

    @property
    def windows(self) -> List[RateLimitWindow]:
        return list(self._windows)

    async def check(self, identifier: str, endpoint: str) -> RateLimitDecision:
        """Admit or reject one request, recording it when admitted.

        Args:
            identifier: User id or client address being limited
            endpoint: Logical endpoint name, qualified per window

        Returns:
            Decision describing the most constrained window

        Raises:
            DatabaseError: If the store fails and fail-open is disabled
        """
        now = self._clock()
        try:
            return await self._check(identifier, endpoint, now)
        except DatabaseError as e:
            if not self._fail_open:
                raise
            logger.error(f"Rate limit check failed for {endpoint}, allowing request: {e}")
            window = self._windows[0]
            return RateLimitDecision(
                allowed=True,
                limit=window.max_requests,
                remaining=window.max_requests,
                reset_at=now + window.duration,
                window=window.name,
            )

    async def enforce(self, identifier: str, endpoint: str) -> RateLimitDecision:
        """Like :meth:`check` but raises when the request is rejected.

        Raises:
            RateLimitExceededError: If any window is exhausted
        """
        decision = await self.check(identifier, endpoint)
        if not decision.allowed:
            raise RateLimitExceededError(
                decision.message or "Rate limit exceeded",
                reset_at=decision.reset_at,
                retry_after=decision.retry_after or 0,
                limit=decision.limit,
                remaining=decision.remaining,
                window=decision.window,
            )
        return decision

    async def _check(self, identifier: str, endpoint: str, now: datetime) -> RateLimitDecision:
        active: List[Tuple[RateLimitWindow, Optional[RateLimitRecord]]] = []

        for window in self._windows:
            record = await self._store.find_active(
                identifier, window.key(endpoint), now - window.duration
            )
            if record is not None and record.request_count >= window.max_requests:
                return await self._reject(identifier, endpoint, window, record, now)
            active.append((window, record))

        decision: Optional[RateLimitDecision] = None
        for window, record in active:
            if record is None:
                record = await self._store.create(
                    identifier, window.key(endpoint), now, window.duration
                )
            else:
                record = await self._store.increment(record)

            candidate = RateLimitDecision(
                allowed=True,
                limit=window.max_requests,
                remaining=max(window.max_requests - record.request_count, 0),
                reset_at=record.window_start + window.duration,
                window=window.name,
            )
            if decision is None or candidate.remaining < decision.remaining:
                decision = candidate

        return decision

    async def _reject(
        self,
        identifier: str,
        endpoint: str,
        window: RateLimitWindow,
        record: RateLimitRecord,
        now: datetime
    ) -> RateLimitDecision:
        reset_at = record.window_start + window.duration
        retry_after = max(math.ceil((reset_at - now).total_seconds()), 1)

        logger.warning(f"Rate limit exceeded for {identifier} on {window.key(endpoint)}")

        if self._notifier is not None:
            try:
                await self._notifier.notify_exceeded(
                    identifier=identifier,
                    endpoint=window.key(endpoint),
                    current_count=record.request_count,
                    max_requests=window.max_requests,
                    retry_after=retry_after,
                    timestamp=now,
                )
            except Exception as e:
                logger.error(f"Failed to send rate limit notification: {e}")

        return RateLimitDecision(
            allowed=False,
            limit=window.max_requests,
            remaining=0,
            reset_at=reset_at,
            retry_after=retry_after,
            window=window.name,
            message=window.exceeded_message(reset_at.isoformat()),
        )


def create_rate_limiter(
    store: RateLimitStore,
    per_minute: int = 10,
    per_hour: int = 50,
    notifier: Optional[RateLimitNotifier] = None,
    fail_open: bool = False
) -> RateLimiter:
    """Create the standard minute/hour rate limiter."""
    return RateLimiter(
        store,
        windows=(RateLimitWindow.minute(per_minute), RateLimitWindow.hour(per_hour)),
        notifier=notifier,
        fail_open=fail_open,
    )
