"""Product Schemas — create/patch payloads and product response."""

from datetime import datetime
from typing import Annotated, ClassVar
from uuid import UUID

from pydantic import Field

from storefront.core.domain_types import Category
from storefront.schemas.base import PatchModel, RequestModel, ResponseModel

ProductName = Annotated[str, Field(strict=True, min_length=1, max_length=60)]
Description = Annotated[str, Field(strict=True, max_length=5000)]
Price = Annotated[float, Field(strict=True, ge=0)]
Stock = Annotated[int, Field(strict=True, ge=0)]


class CreateProduct(RequestModel):
    name: ProductName
    description: Description | None = None
    category: Category
    price: Price
    stock: Stock = 0


class PatchProduct(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"description"})

    name: ProductName | None = None
    description: Description | None = None
    category: Category | None = None
    price: Price | None = None
    stock: Stock | None = None


class ProductResponse(ResponseModel):
    id: UUID
    name: str
    description: str | None
    category: str
    price: float
    stock: int
    created_at: datetime
    updated_at: datetime
