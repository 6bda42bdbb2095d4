"""Order validators."""

from .order_validator import OrderValidator, create_order_validator, validate_teeth_number

__all__ = ["OrderValidator", "create_order_validator", "validate_teeth_number"]
