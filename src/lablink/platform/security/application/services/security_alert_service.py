"""Security alert service.

ONLY audit reporting - records blocked uploads and rate limit rejections.
Reporting never changes the outcome of the request being audited, so
repository failures are logged and swallowed here.
"""

import logging
from datetime import datetime
from typing import List, Optional

from .....config.constants import AlertSeverity, AlertType
from ...core.entities.security_alert import AdminNotification, SecurityAlert
from ...core.protocols.security_alert_repository import SecurityAlertRepository

logger = logging.getLogger(__name__)


RATE_LIMIT_CATEGORY = "rate_limiting"


class SecurityAlertService:
    """Writes security alerts and admin notifications."""

    def __init__(self, repository: SecurityAlertRepository):
        self._repository = repository

    async def report_malicious_upload(
        self,
        user_id: str,
        email: Optional[str],
        file_name: str,
        file_size: int,
        mime_type: str,
        errors: List[str],
        order_id: Optional[str] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None
    ) -> bool:
        """Record an upload rejected by the integrity validator.

        Returns:
            True if the alert was stored
        """
        alert = SecurityAlert(
            alert_type=AlertType.MALICIOUS_FILE_UPLOAD.value,
            severity=AlertSeverity.HIGH,
            title="Malicious File Upload Attempt Blocked",
            description=f"User {email or user_id} attempted to upload suspicious file: {file_name}",
            user_id=user_id,
            ip_address=ip_address,
            user_agent=user_agent,
            metadata={
                "fileName": file_name,
                "fileSize": file_size,
                "mimeType": mime_type,
                "errors": list(errors),
                "orderId": order_id,
            },
        )
        try:
            await self._repository.create_security_alert(alert)
        except Exception as e:
            logger.error(f"Failed to record security alert for {file_name!r}: {e}")
            return False
        return True

    async def notify_exceeded(
        self,
        identifier: str,
        endpoint: str,
        current_count: int,
        max_requests: int,
        retry_after: int,
        timestamp: datetime
    ) -> None:
        """Record an admin notification for a rejected request.

        Satisfies the rate limiter's notifier contract.
        """
        notification = AdminNotification(
            title="Rate Limit Exceeded",
            message=f"Rate limit exceeded on {endpoint}. Identifier: {identifier[:20]}...",
            severity=AlertSeverity.WARNING,
            category=RATE_LIMIT_CATEGORY,
            metadata={
                "endpoint": endpoint,
                "identifier": identifier[:50],
                "currentCount": current_count,
                "maxRequests": max_requests,
                "retryAfter": retry_after,
                "timestamp": timestamp.isoformat(),
            },
        )
        try:
            await self._repository.create_admin_notification(notification)
        except Exception as e:
            logger.error(f"Failed to create admin notification: {e}")


def create_security_alert_service(repository: SecurityAlertRepository) -> SecurityAlertService:
    """Create security alert service."""
    return SecurityAlertService(repository)
