"""
Base Domain Event.

All domain events inherit from this base class.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict
import uuid


_BASE_FIELDS = ("event_id", "event_type", "aggregate_id", "aggregate_type", "occurred_at")


@dataclass
class DomainEvent:
    """
    Base class for all domain events.

    Events are immutable records of things that have happened to an
    aggregate. They are collected on the entity and handed to an
    EventDispatcher once the change is persisted.
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: str = field(init=False, default="")

    aggregate_id: str = field(default="")
    aggregate_type: str = field(init=False, default="")

    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        """Set event type and aggregate type from class name."""
        if not self.event_type:
            self.event_type = self.__class__.__name__
        if not self.aggregate_type:
            self.aggregate_type = self._get_aggregate_type()

    def _get_aggregate_type(self) -> str:
        """
        Extract aggregate type from event type.

        Example: CustomerAddressChangedEvent -> Customer
        """
        event_name = self.__class__.__name__
        if event_name.endswith("Event"):
            event_name = event_name[:-5]

        for i, char in enumerate(event_name):
            if i > 0 and char.isupper():
                return event_name[:i]

        return event_name

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to dictionary for logging and serialization.

        Returns:
            Dictionary representation of event
        """
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "occurred_at": self.occurred_at.isoformat(),
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """Event-specific payload (every field not on the base class)."""
        data = {}
        for key, value in self.__dict__.items():
            if key in _BASE_FIELDS:
                continue
            if isinstance(value, Decimal):
                data[key] = str(value)
            elif hasattr(value, "__dataclass_fields__"):
                data[key] = str(value)
            else:
                data[key] = value
        return data
