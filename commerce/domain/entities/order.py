"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence, Tuple

from ..exceptions import ValidationError
from ..value_objects import to_amount


@dataclass(frozen=True)
class OrderItem:
    """
    Individual line item within an order.

    `price` is the unit price snapshot taken from the product when the item
    was built; later product price changes do not touch it.
    """
    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int

    def __post_init__(self):
        object.__setattr__(self, "price", to_amount(self.price, "price"))

        if not self.id:
            raise ValidationError("Item id is required")
        if not self.product_id:
            raise ValidationError("Item product_id is required")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(f"Quantity must be an integer, got: {self.quantity!r}")
        if self.quantity <= 0:
            raise ValidationError(f"Quantity must be greater than 0, got: {self.quantity}")
        if self.price < 0:
            raise ValidationError(f"Price must not be negative, got: {self.price}")

    def total(self) -> Decimal:
        """Unit price times quantity."""
        return self.price * self.quantity


@dataclass(frozen=True)
class Order:
    """
    Order aggregate root.

    Owns its items exclusively. The item sequence is stored as a tuple so
    callers cannot splice it; to change composition build a new Order with
    the complete item list and hand it to the repository's update().
    """
    id: str
    customer_id: str
    items: Tuple[OrderItem, ...]

    def __init__(self, id: str, customer_id: str, items: Sequence[OrderItem]):
        object.__setattr__(self, "id", id)
        object.__setattr__(self, "customer_id", customer_id)
        object.__setattr__(self, "items", tuple(items))
        self.validate()

    def validate(self) -> None:
        """
        Check aggregate invariants.

        Raises:
            ValidationError: If id or customer_id is empty, or there are no items
        """
        if not self.id:
            raise ValidationError("Order id is required")
        if not self.customer_id:
            raise ValidationError("Customer id is required")
        if not self.items:
            raise ValidationError("Order must have at least one item")

        for item in self.items:
            if not isinstance(item, OrderItem):
                raise ValidationError(f"Order items must be OrderItem, got: {type(item).__name__}")

        item_ids = [item.id for item in self.items]
        if len(set(item_ids)) != len(item_ids):
            raise ValidationError(f"Item ids must be unique within an order: {item_ids}")

    def total(self) -> Decimal:
        """Sum of price x quantity over all items, recomputed on every call."""
        return sum((item.total() for item in self.items), Decimal("0"))
