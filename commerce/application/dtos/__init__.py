"""Application DTOs."""

from .order_dto import OrderDTO, OrderItemDTO, OrderLineRequest, PlaceOrderRequest

__all__ = ["OrderDTO", "OrderItemDTO", "OrderLineRequest", "PlaceOrderRequest"]
