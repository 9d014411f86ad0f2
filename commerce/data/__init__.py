"""Data layer - infrastructure persistence and mapping."""

from .database import Database, create_engine
from .mappers import CustomerMapper, OrderItemMapper, OrderMapper, ProductMapper
from .models import Base, CustomerModel, OrderItemModel, OrderModel, ProductModel
from .repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
)
from .uow import UnitOfWork

__all__ = [
    "Base",
    "CustomerMapper",
    "CustomerModel",
    "Database",
    "OrderItemMapper",
    "OrderItemModel",
    "OrderMapper",
    "OrderModel",
    "ProductMapper",
    "ProductModel",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyProductRepository",
    "UnitOfWork",
    "create_engine",
]
