"""Security entities."""

from .security_alert import SecurityAlert, AdminNotification

__all__ = ["SecurityAlert", "AdminNotification"]
