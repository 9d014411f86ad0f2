"""Domain services."""

from .order_service import OrderService
from .product_service import ProductService

__all__ = ["OrderService", "ProductService"]
