"""
Database configuration and session management.
"""

from typing import AsyncGenerator, Dict, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from arkfolio.data.models.base import Base
from arkfolio.data.seeding import seed_database
from arkfolio.infra.config.logging_config import get_logger
from arkfolio.infra.config.settings import get_settings

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None


def get_engine() -> AsyncEngine:
    """Get the database engine, creating it on first use."""
    global _engine, _session_factory
    if _engine is None:
        settings = get_settings()
        kwargs = {"echo": settings.debug_sql}
        if ":memory:" in settings.database_url:
            # One shared connection, otherwise every session sees an empty db
            kwargs.update(
                poolclass=StaticPool, connect_args={"check_same_thread": False}
            )
        else:
            kwargs.update(pool_pre_ping=True)
        _engine = create_async_engine(settings.database_url, **kwargs)
        _session_factory = async_sessionmaker(
            _engine, class_=AsyncSession, expire_on_commit=False
        )
    return _engine


def get_session_factory() -> async_sessionmaker:
    """Get the session factory."""
    get_engine()
    return _session_factory


async def init_database(seed: Optional[bool] = None) -> Dict[str, int]:
    """Create tables and load seed data. Returns the seeded row counts."""
    settings = get_settings()
    logger = get_logger("database")

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("database.initialized")

    if not (settings.seed_on_startup if seed is None else seed):
        return {}
    async with get_session_factory()() as session:
        counts = await seed_database(session, settings.seed_path)
    logger.info("database.seeded", **counts)
    return counts


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database session.

    Yields an async database session and ensures proper cleanup.
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
