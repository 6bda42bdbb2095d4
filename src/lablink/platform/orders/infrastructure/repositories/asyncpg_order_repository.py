"""AsyncPG implementation of OrderRepository."""

import logging
from datetime import datetime
from typing import Optional

import asyncpg

from .....config.constants import OrderStatus
from .....core.exceptions import QueryError
from .....database.connection import DatabaseManager
from ...core.entities.order import CreatedOrder, OrderDraft
from ...core.protocols.order_repository import OrderRepository
from ..queries import ORDER_FIND_RECENT_DUPLICATE, ORDER_INSERT

logger = logging.getLogger(__name__)


class AsyncPGOrderRepository(OrderRepository):
    """PostgreSQL persistence for ``orders`` rows."""

    def __init__(self, database: DatabaseManager):
        self.database = database

    async def insert_order(self, doctor_id: str, draft: OrderDraft) -> CreatedOrder:
        try:
            async with self.database.acquire() as conn:
                row = await conn.fetchrow(
                    ORDER_INSERT,
                    doctor_id,
                    draft.doctor_name,
                    draft.patient_name,
                    draft.restoration_type,
                    draft.teeth_shade,
                    draft.shade_system,
                    draft.teeth_number,
                    draft.biological_notes,
                    draft.urgency,
                    OrderStatus.PENDING.value,
                    draft.assigned_lab_id,
                    draft.photos_link,
                    draft.html_export,
                )
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error(f"Database error creating order: {e}")
            raise QueryError(str(e)) from e

        if row is None or not row["id"] or not row["order_number"]:
            raise QueryError("Order was created but response structure is invalid")

        return CreatedOrder(
            id=str(row["id"]),
            order_number=row["order_number"],
            patient_name=row["patient_name"],
            restoration_type=row["restoration_type"],
            urgency=row["urgency"],
            status=row["status"],
            created_at=row["created_at"],
            assigned_lab_id=str(row["assigned_lab_id"]) if row["assigned_lab_id"] else None,
        )

    async def find_recent_duplicate(
        self,
        doctor_id: str,
        patient_name: str,
        teeth_number: str,
        since: datetime
    ) -> Optional[str]:
        try:
            async with self.database.acquire() as conn:
                return await conn.fetchval(
                    ORDER_FIND_RECENT_DUPLICATE, doctor_id, patient_name, teeth_number, since
                )
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            raise QueryError(f"Duplicate order lookup failed: {e}") from e
