"""Order commands."""

from .create_order import CreateOrderCommand, CreateOrderResult, create_create_order_command

__all__ = ["CreateOrderCommand", "CreateOrderResult", "create_create_order_command"]
