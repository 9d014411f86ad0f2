"""Application services."""

from .catalog_service import CustomerApplicationService, ProductApplicationService
from .order_service import OrderApplicationService

__all__ = [
    "CustomerApplicationService",
    "OrderApplicationService",
    "ProductApplicationService",
]
