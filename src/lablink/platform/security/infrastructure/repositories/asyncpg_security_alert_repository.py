"""AsyncPG implementation of SecurityAlertRepository."""

import json
import logging

import asyncpg

from .....core.exceptions import QueryError
from .....database.connection import DatabaseManager
from ...core.entities.security_alert import AdminNotification, SecurityAlert
from ...core.protocols.security_alert_repository import SecurityAlertRepository
from ..queries import ADMIN_NOTIFICATION_INSERT, SECURITY_ALERT_INSERT

logger = logging.getLogger(__name__)


class AsyncPGSecurityAlertRepository(SecurityAlertRepository):
    """Writes ``security_alerts`` and ``admin_notifications`` rows."""

    def __init__(self, database: DatabaseManager):
        self.database = database

    async def create_security_alert(self, alert: SecurityAlert) -> None:
        await self._execute(
            SECURITY_ALERT_INSERT,
            alert.alert_type,
            alert.severity.value,
            alert.title,
            alert.description,
            alert.user_id,
            alert.ip_address,
            alert.user_agent,
            json.dumps(alert.metadata),
        )

    async def create_admin_notification(self, notification: AdminNotification) -> None:
        await self._execute(
            ADMIN_NOTIFICATION_INSERT,
            notification.title,
            notification.message,
            notification.severity.value,
            notification.category,
            json.dumps(notification.metadata),
        )

    async def _execute(self, query: str, *args) -> None:
        try:
            async with self.database.acquire() as conn:
                await conn.execute(query, *args)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            raise QueryError(f"Failed to write security record: {e}") from e
