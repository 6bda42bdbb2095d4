"""Security services."""

from .security_alert_service import SecurityAlertService, create_security_alert_service

__all__ = ["SecurityAlertService", "create_security_alert_service"]
