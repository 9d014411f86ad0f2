"""SQLAlchemy ORM model for Product entity."""

from sqlalchemy import Column, String

from .base import Base


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    id = Column(String(255), primary_key=True)
    name = Column(String(500), nullable=False)
    # Decimal text, never rounded by the store
    price = Column(String(64), nullable=False)

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name={self.name}, price={self.price})>"
