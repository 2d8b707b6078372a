"""
Database boundary package.

Exports:
  - Base: Declarative base for all ORM models
  - get_async_db: FastAPI dependency yielding an AsyncSession
"""

from solarchat.boundary.db.base import Base
from solarchat.boundary.db.connection import get_async_db

__all__ = ["Base", "get_async_db"]
