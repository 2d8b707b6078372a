"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, and FastAPI
dependency for database session injection.

Dependencies: sqlalchemy, solarchat.configs
System role: Database connection lifecycle management
"""

import logging
from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from solarchat.configs import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create the process-wide async SQLAlchemy engine.

    PostgreSQL engines use a connection pool with pool_pre_ping=True so
    stale connections are detected before use. SQLite URLs (local
    development) skip the pool sizing arguments, which aiosqlite rejects.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    db_config = get_settings().database

    if db_config.is_sqlite:
        logger.info("Creating SQLite async engine")
        return create_async_engine(
            db_config.async_database_url,
            echo=db_config.echo_sql,
        )

    logger.info(
        "Creating PostgreSQL async engine",
        extra={"host": db_config.host, "db": db_config.db},
    )
    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Create async session factory for database operations.

    Sessions are bound to the shared engine with autoflush=False and
    expire_on_commit=False so committed rows stay readable for response
    mapping.

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection.

    Creates a new async session for each request and closes it after
    the route completes, even if exceptions occur.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)

    Usage:
        from fastapi import Depends

        @router.get("/sessions/{session_id}")
        async def get_session(session_id: str, db: AsyncSession = Depends(get_async_db)):
            return await chat_session_crud.get_by_session_id(db, session_id)
    """
    session_factory = get_async_session_factory()
    async with session_factory() as session:
        yield session


async def dispose_engine() -> None:
    """Close all pooled connections held by the shared engine."""
    if get_async_engine.cache_info().currsize:
        await get_async_engine().dispose()
        logger.info("Database engine disposed")
