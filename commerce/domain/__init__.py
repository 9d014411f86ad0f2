"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, Order, OrderItem, Product
from .exceptions import CommerceError, NotFoundError, PersistenceError, ValidationError
from .repositories import CustomerRepository, OrderRepository, ProductRepository
from .value_objects import Address

__all__ = [
    "Address",
    "CommerceError",
    "Customer",
    "CustomerRepository",
    "NotFoundError",
    "Order",
    "OrderItem",
    "OrderRepository",
    "PersistenceError",
    "Product",
    "ProductRepository",
    "ValidationError",
]
