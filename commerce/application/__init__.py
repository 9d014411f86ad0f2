"""Application layer - services and DTOs."""

from .dtos import OrderDTO, OrderItemDTO, OrderLineRequest, PlaceOrderRequest
from .services import (
    CustomerApplicationService,
    OrderApplicationService,
    ProductApplicationService,
)

__all__ = [
    # DTOs
    "OrderDTO",
    "OrderItemDTO",
    "OrderLineRequest",
    "PlaceOrderRequest",
    # Services
    "CustomerApplicationService",
    "OrderApplicationService",
    "ProductApplicationService",
]
