"""User ORM — persists customer accounts with their preference and saved products.

Invariants:
    - id is UUID primary key (client never supplies it)
    - email is unique when present
    - user_preference is 1:1 and deleted with the user
    - orders are NOT cascaded: deleting a user who still owns orders fails in the DB

Design Decisions:
    - user_preference lazy="selectin": every user response embeds it, avoids N+1
    - orders/saved_products loaded explicitly via selectinload (not on every list row)
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from storefront.db.base import Base, utcnow
from storefront.models.saved_product import saved_products


class User(Base):
    """User aggregate — owns preference, saved products and orders."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str | None] = mapped_column(
        String(254), nullable=True, unique=True,
    )
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )

    user_preference: Mapped["UserPreference"] = relationship(
        "UserPreference", back_populates="user", uselist=False,
        cascade="all, delete-orphan", lazy="selectin",
    )
    saved_products: Mapped[list["Product"]] = relationship(
        "Product", secondary=saved_products, back_populates="saved_by",
    )
    orders: Mapped[list["Order"]] = relationship(
        "Order", back_populates="user",
    )
