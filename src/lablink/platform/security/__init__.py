"""Security alert platform.

Audit records for blocked uploads and admin notifications for rate
limit rejections.
"""

from .application.services import SecurityAlertService, create_security_alert_service
from .core.entities import AdminNotification, SecurityAlert
from .core.protocols import SecurityAlertRepository

__all__ = [
    "SecurityAlertService",
    "create_security_alert_service",
    "AdminNotification",
    "SecurityAlert",
    "SecurityAlertRepository",
]
