"""Application DTOs for Order operations."""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field


class OrderLineRequest(BaseModel):
    """One requested line: which product and how many."""

    product_id: str = Field(..., min_length=1, description="Product identifier")
    quantity: int = Field(..., gt=0, description="Quantity ordered")

    model_config = {"frozen": True}


class PlaceOrderRequest(BaseModel):
    """Request DTO for placing an order."""

    customer_id: str = Field(..., min_length=1, description="Customer identifier")
    lines: List[OrderLineRequest] = Field(..., min_length=1, description="Requested lines")

    model_config = {"frozen": True}


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    id: str = Field(..., description="Item identifier")
    name: str = Field(..., description="Product name snapshot")
    price: Decimal = Field(..., ge=0, description="Unit price snapshot")
    product_id: str = Field(..., description="Product identifier")
    quantity: int = Field(..., gt=0, description="Quantity ordered")

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order identifier")
    customer_id: str = Field(..., description="Customer identifier")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")
    total: Decimal = Field(..., ge=0, description="Total order amount")

    model_config = {"frozen": True}
