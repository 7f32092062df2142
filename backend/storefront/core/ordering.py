"""List Ordering — resolves the `order` query parameter into a sort key.

Invariants:
    - Unrecognized, absent and "newest" values all sort by created_at descending
    - Price orders only apply to resources that allow them (products)
    - Returns (field_name, descending); no SQLAlchemy here

Design Decisions:
    - Lenient parsing: an unknown order is the default, not a 400
      (ADR: old clients send values the server never supported)
"""

from typing import NamedTuple

from storefront.core.domain_types import ListOrder


class SortKey(NamedTuple):
    field: str
    descending: bool


DEFAULT_SORT = SortKey("created_at", True)

_SORT_KEYS: dict[ListOrder, SortKey] = {
    ListOrder.OLDEST: SortKey("created_at", False),
    ListOrder.PRICE_LOWEST: SortKey("price", False),
    ListOrder.PRICE_HIGHEST: SortKey("price", True),
}

TIMESTAMP_ORDERS = frozenset({ListOrder.NEWEST, ListOrder.OLDEST})
PRICE_ORDERS = TIMESTAMP_ORDERS | {ListOrder.PRICE_LOWEST, ListOrder.PRICE_HIGHEST}


def resolve_sort(
    order: str | None, allowed: frozenset[ListOrder] = TIMESTAMP_ORDERS,
) -> SortKey:
    """Map a raw `order` value to a sort key, falling back to newest-first."""
    try:
        parsed = ListOrder(order)
    except ValueError:
        return DEFAULT_SORT
    if parsed not in allowed:
        return DEFAULT_SORT
    return _SORT_KEYS.get(parsed, DEFAULT_SORT)
