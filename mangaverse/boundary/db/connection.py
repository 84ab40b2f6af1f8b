"""
Database connection management.

One cached async engine serves the API; scripts (create_tables, seed) build a
short-lived sync engine. get_async_db is the FastAPI dependency that gives
each request its own session and transaction.

Dependencies: sqlalchemy, mangaverse.configs
System role: Database connection lifecycle management
"""

import logging
from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy import Engine, create_engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from mangaverse.configs import get_settings

logger = logging.getLogger(__name__)


def _pool_options() -> dict:
    db_config = get_settings().database
    return {
        "echo": db_config.echo_sql,
        "pool_size": db_config.pool_size,
        "max_overflow": db_config.max_overflow,
        "pool_timeout": db_config.pool_timeout,
        "pool_pre_ping": True,
    }


def get_engine() -> Engine:
    """
    Sync engine for one-off scripts.

    Returns:
        Engine: psycopg2 engine with pre-ping enabled
    """
    return create_engine(get_settings().database.database_url, **_pool_options())


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Process-wide asyncpg engine; every request shares its pool.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine
    """
    return create_async_engine(get_settings().database.async_database_url, **_pool_options())


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Async session factory.

    expire_on_commit=False keeps returned ORM rows readable after commit,
    which the services rely on when building response models.
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def dispose_async_engine() -> None:
    """Close pooled connections at shutdown; no-op if the engine was never built."""
    if get_async_engine.cache_info().currsize == 0:
        return
    await get_async_engine().dispose()
    get_async_session_factory.cache_clear()
    get_async_engine.cache_clear()
    logger.info("Database pool disposed")


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a request-scoped session.

    Commits when the endpoint returns normally and rolls back when it
    raises.

    Yields:
        AsyncSession: Session bound to the shared engine
    """
    session_factory = get_async_session_factory()
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
