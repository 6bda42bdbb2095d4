"""Order platform.

Create-order payload validation, duplicate detection and persistence.
"""

from .application.commands import CreateOrderCommand, CreateOrderResult, create_create_order_command
from .application.validators import OrderValidator, create_order_validator
from .core.entities import CreatedOrder, OrderDraft
from .core.protocols import OrderRepository
from .core.value_objects import FieldError, OrderValidationResult

__all__ = [
    "CreateOrderCommand",
    "CreateOrderResult",
    "create_create_order_command",
    "OrderValidator",
    "create_order_validator",
    "CreatedOrder",
    "OrderDraft",
    "OrderRepository",
    "FieldError",
    "OrderValidationResult",
]
