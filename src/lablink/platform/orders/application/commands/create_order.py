"""Create order command.

ONLY order creation - validates the payload, looks for a recent
duplicate and inserts the order.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, List, Optional

from .....core.exceptions import InvalidOrderError
from ...core.entities.order import CreatedOrder, OrderDraft
from ...core.protocols.order_repository import OrderRepository
from ..validators.order_validator import OrderValidator

logger = logging.getLogger(__name__)


DUPLICATE_LOOKBACK = timedelta(hours=24)


@dataclass
class CreateOrderResult:
    """Created order plus non-blocking warnings."""

    order: CreatedOrder
    warnings: List[str] = field(default_factory=list)

    def to_response(self) -> dict:
        return {
            "success": True,
            "message": "Order created successfully",
            "order": self.order.to_response(),
            "warnings": list(self.warnings),
        }


class CreateOrderCommand:
    """Command to create an order for the authenticated doctor."""

    def __init__(
        self,
        repository: OrderRepository,
        validator: Optional[OrderValidator] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc)
    ):
        self._repository = repository
        self._validator = validator or OrderValidator()
        self._clock = clock

    async def execute(self, doctor_id: str, payload: Any) -> CreateOrderResult:
        """Validate and insert an order.

        Args:
            doctor_id: Authenticated user creating the order
            payload: Decoded JSON request body

        Returns:
            Created order with duplicate warnings, if any

        Raises:
            InvalidOrderError: If the payload fails validation
            DatabaseError: If the insert fails
        """
        validation = self._validator.validate(payload)
        if not validation.valid:
            raise InvalidOrderError(
                "One or more fields contain invalid data",
                errors=validation.errors,
                error_code="VALIDATION_FAILED",
            )

        draft = self._validator.to_draft(payload)
        warnings = await self._duplicate_warnings(doctor_id, draft)

        logger.info(f"Creating order for user {doctor_id}")
        order = await self._repository.insert_order(doctor_id, draft)
        logger.info(f"Order created successfully: {order.order_number}")

        return CreateOrderResult(order=order, warnings=warnings)

    async def _duplicate_warnings(self, doctor_id: str, draft: OrderDraft) -> List[str]:
        try:
            order_number = await self._repository.find_recent_duplicate(
                doctor_id,
                draft.patient_name,
                draft.teeth_number,
                self._clock() - DUPLICATE_LOOKBACK,
            )
        except Exception as e:
            logger.error(f"Error checking duplicates: {e}")
            return []

        if order_number:
            return [f"Similar order found: {order_number}"]
        return []


def create_create_order_command(
    repository: OrderRepository,
    validator: Optional[OrderValidator] = None
) -> CreateOrderCommand:
    """Create the create-order command."""
    return CreateOrderCommand(repository, validator=validator)
