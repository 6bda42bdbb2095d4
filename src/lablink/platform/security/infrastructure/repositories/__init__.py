"""Security repositories."""

from .asyncpg_security_alert_repository import AsyncPGSecurityAlertRepository

__all__ = ["AsyncPGSecurityAlertRepository"]
