"""Domain Types — enums shared by models, schemas and services.

Invariants:
    - All valid states encoded as Enums, no raw string matching
    - Enum values are the exact strings clients send and the DB stores

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - Sort orders are enums but parsed leniently (see core/ordering.py)
"""

from enum import Enum


class Category(str, Enum):
    """Product categories."""
    FASHION = "FASHION"
    BEAUTY = "BEAUTY"
    SPORTS = "SPORTS"
    ELECTRONICS = "ELECTRONICS"
    HOME_INTERIOR = "HOME_INTERIOR"
    HOUSEHOLD_SUPPLIES = "HOUSEHOLD_SUPPLIES"
    KITCHENWARE = "KITCHENWARE"


class OrderStatus(str, Enum):
    """Order lifecycle — maps to DB `status` column."""
    PENDING = "PENDING"
    COMPLETE = "COMPLETE"


class ListOrder(str, Enum):
    """Values accepted by the `order` query parameter of list endpoints."""
    NEWEST = "newest"
    OLDEST = "oldest"
    PRICE_LOWEST = "priceLowest"
    PRICE_HIGHEST = "priceHighest"
