"""Infrastructure Layer — database engine and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver exceptions are mapped to core/errors.py types before leaving this layer

Design Decisions:
    - Thin wrappers over SQLAlchemy and logging (ADR: ExMA single responsibility)
"""
