"""Product Service — catalogue queries and writes.

Invariants:
    - get_product returns None for a missing id (GET /products/{id} answers null)
    - update/delete raise ResourceNotFoundError for a missing id
    - An unknown category filter is a QueryShapeError, not an empty page
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import Category
from storefront.core.errors import QueryShapeError, ResourceNotFoundError
from storefront.core.ordering import PRICE_ORDERS, resolve_sort
from storefront.models.product import Product
from storefront.schemas.product import CreateProduct, PatchProduct
from storefront.services.pagination import paginate

logger = logging.getLogger(__name__)


def _parse_category(category: str) -> Category:
    try:
        return Category(category)
    except ValueError:
        allowed = ", ".join(c.value for c in Category)
        raise QueryShapeError(
            f"Invalid category '{category}'. Expected one of: {allowed}",
        )


async def list_products(
    db: AsyncSession,
    offset: int,
    limit: int,
    order: str | None,
    category: str | None = None,
) -> Sequence[Product]:
    query = select(Product)
    if category:
        query = query.where(Product.category == _parse_category(category).value)
    query = paginate(
        query, Product, resolve_sort(order, PRICE_ORDERS), offset, limit,
    )
    result = await db.execute(query)
    return result.scalars().all()


async def get_product(db: AsyncSession, product_id: UUID) -> Product | None:
    return await db.get(Product, product_id)


async def get_product_or_404(db: AsyncSession, product_id: UUID) -> Product:
    product = await get_product(db, product_id)
    if not product:
        raise ResourceNotFoundError("Product", str(product_id))
    return product


async def create_product(db: AsyncSession, body: CreateProduct) -> Product:
    product = Product(**body.model_dump())
    db.add(product)
    await db.commit()
    await db.refresh(product)
    logger.info(
        f"Product {product.id} created", extra={"resource_id": str(product.id)},
    )
    return product


async def update_product(
    db: AsyncSession, product_id: UUID, body: PatchProduct,
) -> Product:
    product = await get_product_or_404(db, product_id)
    for field, value in body.changes().items():
        setattr(product, field, value)
    await db.commit()
    await db.refresh(product)
    logger.info(
        f"Product {product_id} updated", extra={"resource_id": str(product_id)},
    )
    return product


async def delete_product(db: AsyncSession, product_id: UUID) -> None:
    product = await get_product_or_404(db, product_id)
    await db.delete(product)
    await db.commit()
    logger.info(
        f"Product {product_id} deleted", extra={"resource_id": str(product_id)},
    )
