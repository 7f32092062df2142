"""Order Routes — nested order creation and reads with a computed total.

Invariants:
    - POST creates the order and its items in one transaction, answers 201
    - GET /orders/{id} adds `total` = Σ unitPrice × quantity (not stored)
    - Missing order → 404 on every by-id route; DELETE answers 204
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.order_total import compute_order_total
from storefront.infrastructure.database import get_db
from storefront.schemas.order import (
    CreateOrder, PatchOrder, OrderDetailResponse, OrderWithItemsResponse,
)
from storefront.services import orders as orders_service

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=list[OrderWithItemsResponse])
async def list_orders(
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=0),
    order: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await orders_service.list_orders(db, offset, limit, order)


@router.post(
    "", response_model=OrderWithItemsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(body: CreateOrder, db: AsyncSession = Depends(get_db)):
    """Create an order with its items."""
    return await orders_service.create_order(db, body)


@router.get("/{order_id}", response_model=OrderDetailResponse)
async def get_order(order_id: UUID, db: AsyncSession = Depends(get_db)):
    """Order with items and computed total."""
    order = await orders_service.get_order_or_404(db, order_id)
    return OrderDetailResponse(
        **OrderWithItemsResponse.model_validate(order).model_dump(),
        total=compute_order_total(order.order_items),
    )


@router.patch("/{order_id}", response_model=OrderWithItemsResponse)
async def update_order(
    order_id: UUID, body: PatchOrder, db: AsyncSession = Depends(get_db),
):
    return await orders_service.update_order(db, order_id, body)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: UUID, db: AsyncSession = Depends(get_db)):
    await orders_service.delete_order(db, order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
