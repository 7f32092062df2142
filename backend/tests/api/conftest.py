"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use test DB sessions
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory + StaticPool: fast, no external dependency, one shared connection
    - raise_app_exceptions=False: the catch-all 500 handler is observable from tests
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from storefront.db.base import Base
from storefront.infrastructure.database import get_db, DatabaseSessionManager
from storefront.models.product import Product
from storefront.models.user import User
from storefront.models.user_preference import UserPreference
import storefront.infrastructure.database as db_module
from storefront.main import app

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_product(test_db):
    """Insert a product directly, with a controllable created_at."""
    async def _make(
        name: str,
        price: float = 10.0,
        category: str = "FASHION",
        minutes: int = 0,
        stock: int = 5,
    ) -> Product:
        product = Product(
            name=name, price=price, category=category, stock=stock,
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )
        test_db.add(product)
        await test_db.commit()
        return product
    return _make


@pytest.fixture
def make_user(test_db):
    """Insert a user directly; with_preference=False leaves the 1:1 row missing."""
    async def _make(
        name: str = "Alice",
        email: str | None = None,
        minutes: int = 0,
        with_preference: bool = True,
    ) -> User:
        user = User(
            name=name, email=email,
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )
        if with_preference:
            user.user_preference = UserPreference(receive_email=False)
        test_db.add(user)
        await test_db.commit()
        return user
    return _make
