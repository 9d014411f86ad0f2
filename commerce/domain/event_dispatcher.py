"""
Event Dispatcher Interface (Domain Layer).

Pure interface definition - no implementation details.
"""
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, List, Union

from .events.base import DomainEvent

EventHandler = Callable[[DomainEvent], Union[None, Awaitable[None]]]


class EventDispatcher(ABC):
    """
    Event Dispatcher Interface.

    Handlers are registered per event type name (e.g. "CustomerCreatedEvent")
    and receive every event of that type passed to notify().
    """

    @abstractmethod
    def register(self, event_type: str, handler: EventHandler) -> None:
        pass

    @abstractmethod
    def unregister(self, event_type: str, handler: EventHandler) -> None:
        pass

    @abstractmethod
    def unregister_all(self) -> None:
        pass

    @abstractmethod
    async def notify(self, event: DomainEvent) -> None:
        """
        Deliver a single domain event to its handlers.

        Args:
            event: Domain event to deliver
        """
        pass

    async def notify_all(self, events: List[DomainEvent]) -> None:
        """Deliver events in order."""
        for event in events:
            await self.notify(event)
