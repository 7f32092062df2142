"""Order Total — pure computation of the derived `total` of an order.

Invariants:
    - total = sum(unit_price * quantity) over all items
    - An order without items totals 0
    - No IO; the value is never persisted

Design Decisions:
    - Pure function over a hybrid property: the total is presentation, computed only
      on the by-id read (ADR: keep ORM models free of business logic)
"""

from typing import Iterable, Protocol


class PricedItem(Protocol):
    unit_price: float
    quantity: int


def compute_order_total(items: Iterable[PricedItem]) -> float:
    """Sum unit_price * quantity over order items. Pure, no IO."""
    return sum((item.unit_price * item.quantity for item in items), 0.0)
