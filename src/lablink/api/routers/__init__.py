"""Gateway routers."""

from .files import router as files_router
from .orders import router as orders_router

__all__ = ["files_router", "orders_router"]
