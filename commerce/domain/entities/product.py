"""
Product entity.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from ..events.base import DomainEvent
from ..exceptions import ValidationError
from ..value_objects import AmountLike, to_amount


@dataclass
class Product:
    """
    A product in the catalog.

    Price changes never affect existing orders: order items keep the price
    snapshot taken when the order was built.
    """
    id: str
    name: str
    price: Decimal

    _domain_events: List[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self.price = to_amount(self.price, "price")
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValidationError("Product id is required")
        if not self.name:
            raise ValidationError("Product name is required")
        if self.price < 0:
            raise ValidationError(f"Product price must not be negative, got: {self.price}")

    @classmethod
    def create(cls, id: str, name: str, price: AmountLike) -> "Product":
        """Factory for a new catalog product; records ProductCreatedEvent."""
        from ..events.product_events import ProductCreatedEvent

        product = cls(id=id, name=name, price=price)
        product._domain_events.append(
            ProductCreatedEvent(product_id=product.id, name=product.name, price=product.price)
        )
        return product

    def change_name(self, name: str) -> None:
        if not name:
            raise ValidationError("Product name is required")
        self.name = name

    def change_price(self, price: AmountLike) -> None:
        price = to_amount(price, "price")
        if price < 0:
            raise ValidationError(f"Product price must not be negative, got: {price}")
        self.price = price

    def pull_domain_events(self) -> List[DomainEvent]:
        """Return collected events and clear them (after publishing)."""
        events = list(self._domain_events)
        self._domain_events.clear()
        return events
