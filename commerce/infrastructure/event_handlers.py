"""Logging handlers for customer and product events."""
from commerce.domain.event_dispatcher import EventDispatcher
from commerce.domain.events import (
    CustomerAddressChangedEvent,
    CustomerCreatedEvent,
    ProductCreatedEvent,
)
from commerce.infrastructure.logging import get_logger


logger = get_logger(__name__)


def log_customer_created(event: CustomerCreatedEvent) -> None:
    logger.info(f"Customer created: {event.customer_id} ({event.name})")


def log_customer_address_changed(event: CustomerAddressChangedEvent) -> None:
    logger.info(
        f"Address of customer {event.customer_id}, {event.name} changed to: {event.address}"
    )


def log_product_created(event: ProductCreatedEvent) -> None:
    logger.info(f"Product created: {event.product_id} ({event.name}) at {event.price}")


def register_default_handlers(dispatcher: EventDispatcher) -> EventDispatcher:
    """Attach the logging handlers above to a dispatcher."""
    dispatcher.register(CustomerCreatedEvent.__name__, log_customer_created)
    dispatcher.register(CustomerAddressChangedEvent.__name__, log_customer_address_changed)
    dispatcher.register(ProductCreatedEvent.__name__, log_product_created)
    return dispatcher


__all__ = [
    "log_customer_address_changed",
    "log_customer_created",
    "log_product_created",
    "register_default_handlers",
]
