"""Database models."""

from .base import Base
from .customer_model import CustomerModel
from .order_model import OrderItemModel, OrderModel
from .product_model import ProductModel

__all__ = ["Base", "CustomerModel", "OrderModel", "OrderItemModel", "ProductModel"]
