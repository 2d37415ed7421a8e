"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager initialized for code that bypasses get_db (readiness probe)
    - `client` sends the owner header for OWNER, so it acts on its own loadout

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the repository's
      ON CONFLICT upsert runs unchanged on SQLite
    - db_manager patched rather than init_db called: the lifespan does not run
      under ASGITransport
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from weaponpaints.db.base import Base
from weaponpaints.infrastructure.database import get_db, DatabaseSessionManager
import weaponpaints.infrastructure.database as db_module
import weaponpaints.models  # noqa: F401
from weaponpaints.main import app

OWNER = "76561198001234567"
OTHER_PLAYER = "76561198007654321"
WEAPONS_URL = f"/api/v1/players/{OWNER}/weapons"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
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
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-Steam-Id": OWNER},
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
