"""Domain service for operations spanning orders and customers."""
from decimal import Decimal
from typing import Iterable, Sequence
import uuid

from ..entities.customer import Customer
from ..entities.order import Order, OrderItem
from ..exceptions import ValidationError


class OrderService:
    """Stateless domain logic that does not belong to a single aggregate."""

    @staticmethod
    def total(orders: Iterable[Order]) -> Decimal:
        """Sum of every order's total."""
        return sum((order.total() for order in orders), Decimal("0"))

    @staticmethod
    def place_order(customer: Customer, items: Sequence[OrderItem]) -> Order:
        """
        Build a new order for a customer and credit reward points.

        The customer earns half of the order total in reward points.

        Args:
            customer: Customer placing the order
            items: Complete item list

        Returns:
            New Order with a generated id

        Raises:
            ValidationError: If items is empty
        """
        if not items:
            raise ValidationError("Order must have at least one item")

        order = Order(id=str(uuid.uuid4()), customer_id=customer.id, items=items)
        customer.add_reward_points(order.total() / 2)
        return order
