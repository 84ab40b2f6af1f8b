"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_engine(): Sync engine for scripts
  - get_async_engine(), get_async_session_factory(), get_async_db(), dispose_async_engine(): Async connection management

Dependencies: sqlalchemy, mangaverse.configs
System role: Database adapter providing persistent storage for accounts,
user state, editorial content, ads, settings and analytics.
"""

from mangaverse.boundary.db.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin
from mangaverse.boundary.db.connection import (
    dispose_async_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
    get_engine,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "dispose_async_engine",
    "get_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
]
