"""
NoteKeeper Backend — Database Session Management
==================================================

What:  Async SQLAlchemy engine, session factory, schema bootstrap and the
       FastAPI session dependency.
How:   Creates an async engine from `settings.database_url`, provides a
       session dependency that rolls back on error, and creates the
       `users`/`notes` tables if they are absent.
Who:   Used by route handlers via FastAPI's dependency injection system and
       by the application lifespan.
When:  Engine is created at module import; sessions are created per-request;
       schema bootstrap runs once at startup.

Connection Pooling:
    SQLite (the default) uses SQLAlchemy's built-in pool for the dialect and
    takes no sizing options. For server databases the pool is sized from
    settings (pool_size, max_overflow, pre_ping, hourly recycle).
"""

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from notekeeper.config import settings

logger = logging.getLogger(__name__)


def _engine_options() -> Dict[str, Any]:
    """Engine keyword arguments for the configured backend."""
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: ORM rows stay readable after the service commits.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models share this metadata, which `init_schema()` uses to create the
    tables on startup.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits anything still pending (services commit
           their own writes, so this is normally a no-op)
        4. On error: rolls back the transaction
        5. Always: closes the session

    Example usage in a route:
        @router.post("/notes")
        async def create_note(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def init_schema(bind: AsyncEngine = engine) -> None:
    """
    Create the `users` and `notes` tables if they do not exist.

    Idempotent: `create_all` checks for each table before issuing CREATE
    TABLE, so running it on every startup is safe. There are no migrations.
    """
    # Registers the models on Base.metadata
    from notekeeper.models import note, user  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready (%s)", ", ".join(sorted(Base.metadata.tables)))


async def ping(bind: AsyncEngine = engine) -> bool:
    """Run `SELECT 1` against the database; False if it cannot be reached."""
    try:
        async with bind.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning("Database ping failed: %s", str(e))
        return False


async def dispose_engine() -> None:
    """Gracefully close all pooled connections (called at shutdown)."""
    await engine.dispose()
