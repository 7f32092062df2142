"""User Routes — CRUD for users plus saved-products and orders sub-resources.

Invariants:
    - Bodies validated by Pydantic (CreateUser/PatchUser) before any DB call
    - Missing user → 404 on every by-id route
    - DELETE answers 200 with plain text "Success delete"
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.infrastructure.database import get_db
from storefront.schemas.order import OrderResponse
from storefront.schemas.product import ProductResponse
from storefront.schemas.user import (
    CreateUser, PatchUser, SaveProduct, UserResponse, UserWriteResponse,
)
from storefront.services import users as users_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=0),
    order: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """List users, newest first unless order=oldest."""
    return await users_service.list_users(db, offset, limit, order)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
    return await users_service.get_user_or_404(db, user_id)


@router.post(
    "", response_model=UserWriteResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(body: CreateUser, db: AsyncSession = Depends(get_db)):
    """Create a user together with its preference."""
    return await users_service.create_user(db, body)


@router.patch("/{user_id}", response_model=UserWriteResponse)
async def update_user(
    user_id: UUID, body: PatchUser, db: AsyncSession = Depends(get_db),
):
    return await users_service.update_user(db, user_id, body)


@router.delete("/{user_id}", response_class=PlainTextResponse)
async def delete_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
    await users_service.delete_user(db, user_id)
    return "Success delete"


@router.get("/{user_id}/saved-products", response_model=list[ProductResponse])
async def list_saved_products(
    user_id: UUID, db: AsyncSession = Depends(get_db),
):
    return await users_service.list_saved_products(db, user_id)


@router.post("/{user_id}/saved-products", response_model=list[ProductResponse])
async def save_product(
    user_id: UUID, body: SaveProduct, db: AsyncSession = Depends(get_db),
):
    """Add a product to the user's saved list; returns the whole list."""
    return await users_service.save_product(db, user_id, body.product_id)


@router.get("/{user_id}/orders", response_model=list[OrderResponse])
async def list_user_orders(user_id: UUID, db: AsyncSession = Depends(get_db)):
    return await users_service.list_user_orders(db, user_id)
