"""
NoteKeeper Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh for each test):
    ├── mock_db_session:  AsyncMock standing in for AsyncSession
    ├── db_engine:        async SQLite engine on a file in tmp_path, schema created
    ├── db_session:       real AsyncSession bound to db_engine
    ├── registry:         empty SessionRegistry
    └── test_client:      HTTPX AsyncClient wired to the app, with get_db_session
                          and get_session_registry overridden to the two above
"""

import os
import tempfile
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run BEFORE any notekeeper import: settings and the engine are built at import time
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="notekeeper_test_"), "app.db")
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"  # keep hashing fast in tests

from notekeeper.database import get_db_session, init_schema  # noqa: E402
from notekeeper.services.session_registry import (  # noqa: E402
    SessionRegistry,
    get_session_registry,
)


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value.scalars.return_value.all.return_value = []
            result = await note_service.list_notes(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """A fresh SQLite database file with the users/notes schema."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(db_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A real AsyncSession on the per-test database."""
    async with db_session_factory() as session:
        yield session


@pytest.fixture
def registry():
    """An empty session registry, isolated from the process-wide singleton."""
    return SessionRegistry()


@pytest_asyncio.fixture
async def test_client(db_session_factory, registry):
    """
    Provides an async HTTP test client for endpoint testing.

    How:   Uses ASGITransport to route requests directly to the app. Each
           request gets its own session from the per-test database, the same
           way get_db_session works in production.

    Usage:
        async def test_signup(test_client):
            response = await test_client.post("/signup", json={...})
            assert response.status_code == 200
    """
    from notekeeper.main import app

    async def override_get_db_session():
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_session_registry] = lambda: registry

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def signup_payload():
    """Account used by the end-to-end scenario."""
    return {"name": "Ann", "email": "a@x.com", "password": "p"}
