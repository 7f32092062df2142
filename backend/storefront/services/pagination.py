"""Pagination — applies a resolved SortKey plus offset/limit to a select().

Invariants:
    - Rows are ordered by the sort column, then by id (stable pages on ties)
    - offset/limit already validated as non-negative by the route layer
"""

from sqlalchemy import Select

from storefront.core.ordering import SortKey


def paginate(query: Select, model, sort: SortKey, offset: int, limit: int) -> Select:
    column = getattr(model, sort.field)
    primary = column.desc() if sort.descending else column.asc()
    return query.order_by(primary, model.id.asc()).offset(offset).limit(limit)
