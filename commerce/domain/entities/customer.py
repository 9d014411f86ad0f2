"""
Customer entity.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from ..events.base import DomainEvent
from ..exceptions import ValidationError
from ..value_objects import Address, AmountLike, to_amount


@dataclass
class Customer:
    """
    Customer entity.

    Orders reference a customer by id only; the customer does not own its
    orders. A customer can only be activated once an address is assigned.
    """
    id: str
    name: str
    address: Optional[Address] = None
    active: bool = False
    reward_points: Decimal = Decimal("0")

    _domain_events: List[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self.reward_points = to_amount(self.reward_points, "reward_points")
        self.validate()

    def validate(self) -> None:
        """
        Check entity invariants.

        Raises:
            ValidationError: If id or name is empty
        """
        if not self.id:
            raise ValidationError("Customer id is required")
        if not self.name:
            raise ValidationError("Customer name is required")
        if self.active and self.address is None:
            raise ValidationError("Active customer must have an address")

    @classmethod
    def create(cls, id: str, name: str) -> "Customer":
        """Factory for a brand new customer; records CustomerCreatedEvent."""
        from ..events.customer_events import CustomerCreatedEvent

        customer = cls(id=id, name=name)
        customer._domain_events.append(
            CustomerCreatedEvent(customer_id=customer.id, name=customer.name)
        )
        return customer

    def change_name(self, name: str) -> None:
        if not name:
            raise ValidationError("Customer name is required")
        self.name = name

    def change_address(self, address: Address) -> None:
        """Replace the address and record CustomerAddressChangedEvent."""
        from ..events.customer_events import CustomerAddressChangedEvent

        self.address = address
        self._domain_events.append(
            CustomerAddressChangedEvent(
                customer_id=self.id,
                name=self.name,
                address=str(address),
            )
        )

    def activate(self) -> None:
        """Business rule: an address is mandatory to activate a customer."""
        if self.address is None:
            raise ValidationError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def is_active(self) -> bool:
        return self.active

    def add_reward_points(self, points: AmountLike) -> None:
        points = to_amount(points, "points")
        if points < 0:
            raise ValidationError(f"Reward points must not be negative, got: {points}")
        self.reward_points += points

    def pull_domain_events(self) -> List[DomainEvent]:
        """Return collected events and clear them (after publishing)."""
        events = list(self._domain_events)
        self._domain_events.clear()
        return events
