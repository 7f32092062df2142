"""Order Service — nested order creation and order reads/writes.

Invariants:
    - Order and its OrderItems are flushed in the same commit (all or nothing)
    - get_order_or_404 always returns the order with its items loaded
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.errors import ResourceNotFoundError
from storefront.core.ordering import resolve_sort
from storefront.models.order import Order
from storefront.models.order_item import OrderItem
from storefront.schemas.order import CreateOrder, PatchOrder
from storefront.services.pagination import paginate

logger = logging.getLogger(__name__)


async def list_orders(
    db: AsyncSession, offset: int, limit: int, order: str | None,
) -> Sequence[Order]:
    query = paginate(select(Order), Order, resolve_sort(order), offset, limit)
    result = await db.execute(query)
    return result.scalars().all()


async def get_order_or_404(db: AsyncSession, order_id: UUID) -> Order:
    query = (
        select(Order)
        .where(Order.id == order_id)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(query)
    order = result.scalar_one_or_none()
    if not order:
        raise ResourceNotFoundError("Order", str(order_id))
    return order


async def create_order(db: AsyncSession, body: CreateOrder) -> Order:
    order = Order(
        user_id=body.user_id,
        order_items=[OrderItem(**item.model_dump()) for item in body.order_items],
    )
    db.add(order)
    await db.commit()
    logger.info(
        f"Order {order.id} created with {len(body.order_items)} item(s)",
        extra={"resource_id": str(order.id)},
    )
    return await get_order_or_404(db, order.id)


async def update_order(db: AsyncSession, order_id: UUID, body: PatchOrder) -> Order:
    order = await get_order_or_404(db, order_id)
    order.status = body.status
    await db.commit()
    logger.info(
        f"Order {order_id} set to {body.status}",
        extra={"resource_id": str(order_id)},
    )
    return await get_order_or_404(db, order_id)


async def delete_order(db: AsyncSession, order_id: UUID) -> None:
    order = await get_order_or_404(db, order_id)
    await db.delete(order)
    await db.commit()
    logger.info(f"Order {order_id} deleted", extra={"resource_id": str(order_id)})
