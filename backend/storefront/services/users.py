"""User Service — queries and writes for users, their preference and saved products.

Invariants:
    - User + UserPreference are committed in one transaction
    - get_user_or_404 raises ResourceNotFoundError, never returns None
    - Every write re-reads the user so responses reflect committed state

Design Decisions:
    - Relations other than user_preference are loaded on demand (selectinload)
    - populate_existing on reads: a user already in the identity map is refreshed
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.core.errors import ResourceNotFoundError
from storefront.core.ordering import resolve_sort
from storefront.models.order import Order
from storefront.models.product import Product
from storefront.models.user import User
from storefront.models.user_preference import UserPreference
from storefront.schemas.user import CreateUser, PatchUser
from storefront.services.pagination import paginate

logger = logging.getLogger(__name__)


async def list_users(
    db: AsyncSession, offset: int, limit: int, order: str | None,
) -> Sequence[User]:
    query = paginate(select(User), User, resolve_sort(order), offset, limit)
    result = await db.execute(query)
    return result.scalars().all()


async def get_user_or_404(
    db: AsyncSession, user_id: UUID, *relations: str,
) -> User:
    """Get user (plus requested relations) or raise ResourceNotFoundError."""
    query = (
        select(User)
        .where(User.id == user_id)
        .options(*(selectinload(getattr(User, r)) for r in relations))
        .execution_options(populate_existing=True)
    )
    result = await db.execute(query)
    user = result.scalar_one_or_none()
    if not user:
        raise ResourceNotFoundError("User", str(user_id))
    return user


async def create_user(db: AsyncSession, body: CreateUser) -> User:
    user = User(**body.model_dump(exclude={"user_preference"}))
    user.user_preference = UserPreference(**body.user_preference.model_dump())
    db.add(user)
    await db.commit()
    logger.info(f"User {user.id} created", extra={"resource_id": str(user.id)})
    return await get_user_or_404(db, user.id)


async def update_user(db: AsyncSession, user_id: UUID, body: PatchUser) -> User:
    user = await get_user_or_404(db, user_id)
    for field, value in body.changes(exclude={"user_preference"}).items():
        setattr(user, field, value)
    if body.user_preference is not None:
        if user.user_preference is None:
            raise ResourceNotFoundError("UserPreference", str(user_id))
        user.user_preference.receive_email = body.user_preference.receive_email
    await db.commit()
    logger.info(f"User {user_id} updated", extra={"resource_id": str(user_id)})
    return await get_user_or_404(db, user_id)


async def delete_user(db: AsyncSession, user_id: UUID) -> None:
    user = await get_user_or_404(db, user_id)
    await db.delete(user)
    await db.commit()
    logger.info(f"User {user_id} deleted", extra={"resource_id": str(user_id)})


async def list_saved_products(db: AsyncSession, user_id: UUID) -> list[Product]:
    user = await get_user_or_404(db, user_id, "saved_products")
    return user.saved_products


async def save_product(
    db: AsyncSession, user_id: UUID, product_id: UUID,
) -> list[Product]:
    """Add a product to the user's saved list. Saving twice is a no-op."""
    user = await get_user_or_404(db, user_id, "saved_products")
    product = await db.get(Product, product_id)
    if not product:
        raise ResourceNotFoundError("Product", str(product_id))
    if product not in user.saved_products:
        user.saved_products.append(product)
        await db.commit()
        logger.info(
            f"User {user_id} saved product {product_id}",
            extra={"resource_id": str(user_id)},
        )
    return await list_saved_products(db, user_id)


async def list_user_orders(db: AsyncSession, user_id: UUID) -> list[Order]:
    user = await get_user_or_404(db, user_id, "orders")
    return user.orders
