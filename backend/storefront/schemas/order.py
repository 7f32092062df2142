"""Order Schemas — nested order creation, status patch and order responses.

Invariants:
    - CreateOrder carries its items; they are persisted with the order or not at all
    - quantity >= 1, unitPrice >= 0
    - OrderDetailResponse.total is derived (core/order_total.py), never read from the DB
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import Field

from storefront.core.domain_types import OrderStatus
from storefront.schemas.base import RequestModel, ResponseModel
from storefront.schemas.product import Price

Quantity = Annotated[int, Field(strict=True, ge=1)]


class OrderItemInput(RequestModel):
    product_id: UUID
    unit_price: Price
    quantity: Quantity


class CreateOrder(RequestModel):
    user_id: UUID
    order_items: list[OrderItemInput]


class PatchOrder(RequestModel):
    status: OrderStatus


class OrderItemResponse(ResponseModel):
    id: UUID
    order_id: UUID
    product_id: UUID
    unit_price: float
    quantity: int


class OrderResponse(ResponseModel):
    """Order without items (user's order list)."""
    id: UUID
    user_id: UUID
    status: str
    created_at: datetime
    updated_at: datetime


class OrderWithItemsResponse(OrderResponse):
    order_items: list[OrderItemResponse] = []


class OrderDetailResponse(OrderWithItemsResponse):
    total: float
