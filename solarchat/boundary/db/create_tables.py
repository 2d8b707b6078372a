"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, solarchat.configs
System role: Database schema initialization

Usage:
    python -m solarchat.boundary.db.create_tables
    python -m solarchat.boundary.db.create_tables --drop
"""

import argparse
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from solarchat.boundary.db.base import Base
from solarchat.boundary.db.connection import dispose_engine, get_async_engine

# Import all models to register them with Base.metadata
from solarchat.boundary.db.models import (  # noqa: F401
    ChatMessageModel,
    ChatSessionModel,
    RagChunkModel,
    RagDocumentModel,
)

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables are left unchanged, so it is safe to run
    on every startup.

    Args:
        engine: Engine to use; defaults to the configured application engine

    Raises:
        SQLAlchemyError: If the connection or table creation fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables created", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Engine to use; defaults to the configured application engine
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("All tables dropped")


async def _main(drop: bool) -> None:
    try:
        if drop:
            await drop_all_tables()
        await create_all_tables()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    from solarchat.configs import get_settings
    from solarchat.observability.logger import configure_logging

    parser = argparse.ArgumentParser(description="Create the chat assistant tables")
    parser.add_argument("--drop", action="store_true", help="Drop all tables first")
    args = parser.parse_args()

    configure_logging(get_settings().log_level)
    asyncio.run(_main(drop=args.drop))
