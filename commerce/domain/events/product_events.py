"""Product domain events."""
from dataclasses import dataclass
from decimal import Decimal

from .base import DomainEvent


@dataclass
class ProductCreatedEvent(DomainEvent):
    """A product was added to the catalog."""

    product_id: str = ""
    name: str = ""
    price: Decimal = Decimal("0")

    def __post_init__(self):
        if not self.aggregate_id and self.product_id:
            self.aggregate_id = self.product_id
        super().__post_init__()
