"""Database Session Manager — async connection pool with automatic rollback and error mapping.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped through classify_database_error (core/errors.py types)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (ADR: no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Unique violations detected by SQLSTATE 23505, falling back to the driver message
      for SQLite (which has no SQLSTATE)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.engine import make_url
from sqlalchemy.exc import (
    IntegrityError, DataError, DBAPIError, NoResultFound,
    SQLAlchemyError, StatementError,
)
from sqlalchemy import text

from storefront.core.errors import (
    StorefrontError, ConflictError, QueryShapeError, RecordNotFoundError,
    DatabaseError,
)

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION
    return "unique" in str(orig).lower()


def classify_database_error(exc: SQLAlchemyError) -> StorefrontError:
    """Map a SQLAlchemy exception onto the Storefront error hierarchy."""
    if isinstance(exc, IntegrityError):
        if _is_unique_violation(exc):
            return ConflictError(f"Unique constraint failed: {exc.orig}")
        return DatabaseError(str(exc.orig), "commit")
    if isinstance(exc, DataError):
        return QueryShapeError(f"Invalid query value: {exc.orig}")
    if isinstance(exc, NoResultFound):
        return RecordNotFoundError("Record to operate on not found")
    if isinstance(exc, StatementError) and not isinstance(exc, DBAPIError):
        # Parameters rejected before reaching the driver
        return QueryShapeError(f"Invalid query: {exc.orig or exc}")
    if isinstance(exc, DBAPIError):
        return DatabaseError(str(exc.orig), "query")
    return DatabaseError(str(exc), "operation")


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        pool_kwargs = {}
        if make_url(database_url).get_backend_name() != "sqlite":
            pool_kwargs = {
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_recycle": 3600,
            }
        self.engine = create_async_engine(
            database_url, pool_pre_ping=True, **pool_kwargs,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            error = classify_database_error(e)
            logger.error(
                f"DB error: {e}", extra={"error_code": error.code},
            )
            raise error from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def close_db():
    global db_manager
    if db_manager:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
