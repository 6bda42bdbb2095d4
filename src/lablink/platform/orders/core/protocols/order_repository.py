"""Order repository protocol."""

from datetime import datetime
from typing import Optional
from typing_extensions import Protocol, runtime_checkable

from ..entities.order import CreatedOrder, OrderDraft


@runtime_checkable
class OrderRepository(Protocol):
    """Persistence for ``orders`` rows."""

    async def insert_order(self, doctor_id: str, draft: OrderDraft) -> CreatedOrder:
        """Insert a new order and return the stored row.

        Raises:
            DatabaseError: If the insert fails or returns no order number
        """
        ...

    async def find_recent_duplicate(
        self,
        doctor_id: str,
        patient_name: str,
        teeth_number: str,
        since: datetime
    ) -> Optional[str]:
        """Return the order number of a matching order created after ``since``.

        Patient names compare case-insensitively.
        """
        ...
