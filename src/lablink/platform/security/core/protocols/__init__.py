"""Security protocols."""

from .security_alert_repository import SecurityAlertRepository

__all__ = ["SecurityAlertRepository"]
