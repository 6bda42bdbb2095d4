"""Order value objects."""

from .order_validation_result import FieldError, OrderValidationResult

__all__ = ["FieldError", "OrderValidationResult"]
