"""Product Routes — catalogue CRUD.

Invariants:
    - GET /products/{id} answers null (200) for a missing id; PATCH/DELETE answer 404
    - POST answers 200, not 201 (kept for existing clients)
    - DELETE answers 204 with no body
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.infrastructure.database import get_db
from storefront.schemas.product import CreateProduct, PatchProduct, ProductResponse
from storefront.services import products as products_service

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=0),
    order: str | None = Query(None),
    category: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """List products. order: priceLowest | priceHighest | oldest | newest."""
    return await products_service.list_products(db, offset, limit, order, category)


@router.get("/{product_id}", response_model=ProductResponse | None)
async def get_product(product_id: UUID, db: AsyncSession = Depends(get_db)):
    return await products_service.get_product(db, product_id)


@router.post("", response_model=ProductResponse)
async def create_product(body: CreateProduct, db: AsyncSession = Depends(get_db)):
    return await products_service.create_product(db, body)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: UUID, body: PatchProduct, db: AsyncSession = Depends(get_db),
):
    return await products_service.update_product(db, product_id, body)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: UUID, db: AsyncSession = Depends(get_db)):
    await products_service.delete_product(db, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
