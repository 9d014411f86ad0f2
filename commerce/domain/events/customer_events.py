"""Customer domain events."""
from dataclasses import dataclass

from .base import DomainEvent


@dataclass
class CustomerCreatedEvent(DomainEvent):
    """A new customer was registered."""

    customer_id: str = ""
    name: str = ""

    def __post_init__(self):
        if not self.aggregate_id and self.customer_id:
            self.aggregate_id = self.customer_id
        super().__post_init__()


@dataclass
class CustomerAddressChangedEvent(DomainEvent):
    """
    A customer's address was replaced.

    Carries the new address rendered as a single line.
    """

    customer_id: str = ""
    name: str = ""
    address: str = ""

    def __post_init__(self):
        if not self.aggregate_id and self.customer_id:
            self.aggregate_id = self.customer_id
        super().__post_init__()
