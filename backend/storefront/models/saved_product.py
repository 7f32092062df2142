"""Saved Products — association table for the user <-> product wishlist.

Invariants:
    - (user_id, product_id) is the primary key: a product is saved at most once per user
    - Rows disappear with either side (ON DELETE CASCADE)
"""

from sqlalchemy import Column, ForeignKey, Table
from sqlalchemy.dialects.postgresql import UUID

from storefront.db.base import Base

saved_products = Table(
    "saved_products",
    Base.metadata,
    Column(
        "user_id", UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "product_id", UUID(as_uuid=True),
        ForeignKey("products.id", ondelete="CASCADE"), primary_key=True,
    ),
)
