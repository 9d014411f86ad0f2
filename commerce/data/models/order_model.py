"""SQLAlchemy ORM models for Order aggregate."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(255), primary_key=True)
    customer_id = Column(String(255), ForeignKey("customers.id"), nullable=False, index=True)

    # Denormalized copy of Order.total(); the aggregate recomputes it from items.
    # Money is stored as decimal text so any scale survives a round-trip.
    total = Column(String(64), nullable=False)

    # Relationship to items, kept in the order they were added to the aggregate
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, customer_id={self.customer_id}, total={self.total})>"


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(String(255), primary_key=True)
    order_id = Column(String(255), ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(String(255), ForeignKey("products.id"), nullable=False, index=True)
    name = Column(String(500), nullable=False)
    # Unit price snapshot as decimal text
    price = Column(String(64), nullable=False)
    quantity = Column(Integer, nullable=False)

    # Index of the item inside Order.items
    position = Column(Integer, nullable=False, default=0)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="items")

    def __repr__(self):
        return f"<OrderItemModel(id={self.id}, product_id={self.product_id}, quantity={self.quantity})>"
