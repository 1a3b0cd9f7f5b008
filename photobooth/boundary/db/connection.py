"""
Database connection management.

Provides SQLAlchemy engines, session factories, and the FastAPI dependency
for database session injection. Engines are created once per process and
reused across requests.

Dependencies: sqlalchemy, photobooth.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import Any, AsyncGenerator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from photobooth.configs import get_settings


def _pool_options() -> dict[str, Any]:
    """
    Pool sizing options for the configured backend.

    SQLite engines use SQLAlchemy's default single-file pools, which do not
    accept pool sizing arguments.
    """
    db_config = get_settings().database
    if db_config.is_sqlite:
        return {}
    return {
        "pool_size": db_config.pool_size,
        "max_overflow": db_config.max_overflow,
        "pool_timeout": db_config.pool_timeout,
        "pool_pre_ping": True,  # Verify connections before using
    }


@lru_cache
def get_engine() -> Engine:
    """
    Create sync SQLAlchemy engine with connection pooling and health checks.

    Used by schema management scripts only; request handling is async.

    Returns:
        Engine: Configured SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    db_config = get_settings().database
    return create_engine(
        db_config.database_url,
        echo=db_config.echo_sql,
        **_pool_options(),
    )


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling.

    The engine is cached so every request shares one connection pool.
    pool_pre_ping=True verifies connections before use to detect
    stale/broken connections early.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    db_config = get_settings().database
    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        **_pool_options(),
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker:
    """
    Create async session factory for database operations.

    autoflush=False for explicit transaction control and predictable
    behavior; expire_on_commit=False so representations can be built from
    instances after commit.

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Creates a new async database session for each request and ensures it's closed
    after the route completes, even if exceptions occur. Services commit their
    own writes; anything left uncommitted is rolled back on close.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)

    Usage:
        from fastapi import Depends

        @app.get("/users/{id}")
        async def get_user(id: int, db: AsyncSession = Depends(get_async_db)):
            return await user_crud.get_by_id(db, id)
    """
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        yield session


async def dispose_engines() -> None:
    """Dispose cached engines and reset the caches (application shutdown)."""
    if get_async_engine.cache_info().currsize:
        await get_async_engine().dispose()
    if get_engine.cache_info().currsize:
        get_engine().dispose()
    get_async_session_factory.cache_clear()
    get_async_engine.cache_clear()
    get_engine.cache_clear()
