"""Order repositories."""

from .asyncpg_order_repository import AsyncPGOrderRepository

__all__ = ["AsyncPGOrderRepository"]
