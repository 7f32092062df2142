"""Services Layer — per-resource query and write functions over AsyncSession.

Invariants:
    - One module per resource (users, products, orders)
    - Services raise core/errors.py types; they never build HTTP responses

Design Decisions:
    - Plain async functions over repository classes: no state to hold between calls
"""
