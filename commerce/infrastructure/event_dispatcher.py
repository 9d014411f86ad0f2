"""
Event Dispatcher Implementation (Infrastructure Layer).

Delivers domain events to handlers registered in memory.
"""
import asyncio
from typing import Dict, List

from commerce.domain.event_dispatcher import EventDispatcher, EventHandler
from commerce.domain.events.base import DomainEvent
from commerce.infrastructure.logging import get_logger


logger = get_logger(__name__)


class InMemoryEventDispatcher(EventDispatcher):
    """
    In-Memory Event Dispatcher.

    Handlers for one event type run in registration order. A failing
    handler is logged and does not prevent the remaining handlers from
    running.
    """

    def __init__(self):
        self._handlers: Dict[str, List[EventHandler]] = {}

    @property
    def handlers(self) -> Dict[str, List[EventHandler]]:
        """Registered handlers per event type (copy)."""
        return {event_type: list(handlers) for event_type, handlers in self._handlers.items()}

    def register(self, event_type: str, handler: EventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)
        logger.info(f"Registered handler {_handler_name(handler)} for {event_type}")

    def unregister(self, event_type: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            logger.info(f"Unregistered handler {_handler_name(handler)} for {event_type}")
        if not handlers:
            self._handlers.pop(event_type, None)

    def unregister_all(self) -> None:
        self._handlers.clear()

    async def notify(self, event: DomainEvent) -> None:
        handlers = list(self._handlers.get(event.event_type, []))
        if not handlers:
            logger.debug(f"No handlers for {event.event_type}")
            return

        logger.debug(f"Notifying {len(handlers)} handlers about {event.event_type}")

        for handler in handlers:
            try:
                result = handler(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as e:
                logger.error(f"Handler {_handler_name(handler)} failed: {e}", exc_info=True)


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__name__", type(handler).__name__)
