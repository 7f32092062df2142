"""Product ORM — catalogue entries.

Invariants:
    - name is unique (duplicate create/patch -> ConflictError)
    - price >= 0 and stock >= 0 enforced at the API boundary
    - category stores a Category enum value as plain string

Design Decisions:
    - String column for category over a native DB enum: adding a category needs no
      ALTER TYPE migration (ADR: same approach as order status)
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, Integer, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from storefront.db.base import Base, utcnow
from storefront.models.saved_product import saved_products


class Product(Base):
    """Product entity; written without nested relations."""
    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(60), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )

    saved_by: Mapped[list["User"]] = relationship(
        "User", secondary=saved_products, back_populates="saved_products",
    )
