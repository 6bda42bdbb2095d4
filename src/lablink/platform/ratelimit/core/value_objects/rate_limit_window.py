"""Rate limit window value object."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class RateLimitWindow:
    """A rolling window with its request ceiling."""

    name: str
    duration: timedelta
    max_requests: int
    label: str = "Rate limit"

    def __post_init__(self):
        if self.max_requests < 1:
            raise ValueError("Window ceiling must be at least 1")
        if self.duration <= timedelta(0):
            raise ValueError("Window duration must be positive")

    @classmethod
    def minute(cls, max_requests: int = 10) -> "RateLimitWindow":
        return cls("minute", timedelta(minutes=1), max_requests, "Rate limit")

    @classmethod
    def hour(cls, max_requests: int = 50) -> "RateLimitWindow":
        return cls("hour", timedelta(hours=1), max_requests, "Hourly rate limit")

    def key(self, endpoint: str) -> str:
        """Window-qualified endpoint key stored with each record."""
        return f"{endpoint}_{self.name}"

    def exceeded_message(self, reset_at_iso: str) -> str:
        return (
            f"{self.label} exceeded. Maximum {self.max_requests} requests per "
            f"{self.name}. Try again at {reset_at_iso}"
        )
