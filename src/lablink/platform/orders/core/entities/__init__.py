"""Order entities."""

from .order import OrderDraft, CreatedOrder

__all__ = ["OrderDraft", "CreatedOrder"]
