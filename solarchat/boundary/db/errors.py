"""
Database error translation.

Wraps unit-of-work blocks so SQLAlchemy failures roll back the open
transaction and surface as the application's PersistenceError.

Dependencies: sqlalchemy, solarchat.core.exceptions
System role: Boundary between driver errors and domain errors
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from solarchat.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_db_errors(
    db: AsyncSession,
    operation: str,
) -> AsyncIterator[None]:
    """
    Roll back and re-raise database failures as PersistenceError.

    Args:
        db: Session whose transaction is rolled back on failure
        operation: Short name of the unit of work, used in logs and errors

    Raises:
        PersistenceError: If any SQLAlchemy error escapes the block

    Usage:
        async with translate_db_errors(db, "create_document"):
            await rag_document_crud.create(db, title=title, content=content)
            await db.commit()
    """
    try:
        yield
    except IntegrityError as e:
        await db.rollback()
        logger.error(
            "Integrity violation during database operation",
            extra={"operation": operation, "error": str(e.orig)},
        )
        raise PersistenceError(
            message="Failed to save data: conflicting record",
            operation=operation,
            details={"error": str(e.orig)},
        ) from e
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            "Database operation failed",
            extra={"operation": operation, "error": str(e)},
        )
        raise PersistenceError(
            message="Database operation failed",
            operation=operation,
            details={"error": str(e)},
        ) from e
