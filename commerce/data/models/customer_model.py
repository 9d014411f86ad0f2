"""SQLAlchemy ORM model for Customer entity."""

from sqlalchemy import Boolean, Column, Integer, String

from .base import Base


class CustomerModel(Base):
    """SQLAlchemy ORM model for customers table."""

    __tablename__ = "customers"

    id = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)

    # Address (all null until an address is assigned)
    street = Column(String(255), nullable=True)
    number = Column(Integer, nullable=True)
    zipcode = Column(String(50), nullable=True)
    city = Column(String(255), nullable=True)

    active = Column(Boolean, nullable=False, default=False)
    # Decimal text: points are half an order total and may carry extra places
    reward_points = Column(String(64), nullable=False, default="0")

    def __repr__(self):
        return f"<CustomerModel(id={self.id}, name={self.name}, active={self.active})>"
