"""Rate limit value objects."""

from .rate_limit_window import RateLimitWindow
from .rate_limit_decision import RateLimitDecision

__all__ = ["RateLimitWindow", "RateLimitDecision"]
