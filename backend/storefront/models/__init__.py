"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User and Order are aggregate roots; UserPreference and OrderItem never exist alone

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from storefront.models.saved_product import saved_products  # noqa: F401
from storefront.models.user import User  # noqa: F401
from storefront.models.user_preference import UserPreference  # noqa: F401
from storefront.models.product import Product  # noqa: F401
from storefront.models.order import Order  # noqa: F401
from storefront.models.order_item import OrderItem  # noqa: F401
