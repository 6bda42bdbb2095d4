"""Security alert repository protocol."""

from typing_extensions import Protocol, runtime_checkable

from ..entities.security_alert import AdminNotification, SecurityAlert


@runtime_checkable
class SecurityAlertRepository(Protocol):
    """Persistence for security alerts and admin notifications."""

    async def create_security_alert(self, alert: SecurityAlert) -> None:
        """Record a security alert.

        Raises:
            DatabaseError: If the insert fails
        """
        ...

    async def create_admin_notification(self, notification: AdminNotification) -> None:
        """Record an admin notification.

        Raises:
            DatabaseError: If the insert fails
        """
        ...
