"""Database Package — declarative Base and standalone session factory.

Invariants:
    - Single async engine per process in the API (infrastructure/database.py)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests (ADR: native async, no thread pool overhead)
"""
