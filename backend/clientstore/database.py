"""
Database engine and lifecycle management.

SQLite Notes:
-------------
The default backend is SQLite through aiosqlite, configured with:

1. WAL Mode (Write-Ahead Logging):
   - Readers keep working while a delete transaction holds the write lock

2. NullPool:
   - Creates new connection for each operation (required for async SQLite)
   - SQLite handles concurrent access via file-level locking

3. Busy Timeout (5 seconds):
   - Prevents "database is locked" errors during concurrent access

Any other backend with an async SQLAlchemy driver and RETURNING support
works as well; only the delete isolation level differs.
"""
from typing import Optional
from loguru import logger
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from clientstore.config import settings
from clientstore.constants import (
    SQLITE_BUSY_TIMEOUT_MS,
    SQLITE_DELETE_ISOLATION_LEVEL,
    DEFAULT_DELETE_ISOLATION_LEVEL,
)

# Base class for models
Base = declarative_base()


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    SQLite connections get their pragmas applied on connect.
    """
    engine = create_async_engine(
        database_url,
        echo=echo,
        poolclass=NullPool,
    )

    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", set_sqlite_pragma)

    return engine


def set_sqlite_pragma(dbapi_conn, connection_record):
    """
    Enable SQLite-specific settings on every new connection.
    - PRAGMA foreign_keys=ON: Enable foreign key constraints (disabled by default in SQLite)
    - PRAGMA journal_mode=WAL: Use Write-Ahead Logging for better concurrency
    - PRAGMA busy_timeout: Wait for locks to release instead of failing immediately
    - PRAGMA synchronous=NORMAL: Balance between safety and performance for WAL mode
    """
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute(f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS}")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.close()


def delete_isolation_level(engine: AsyncEngine, override: Optional[str] = None) -> str:
    """
    Isolation level for the cascading client delete.

    Must keep uncommitted writes of other transactions invisible
    (read committed or stronger).
    """
    if override:
        return override
    if engine.dialect.name == "sqlite":
        return SQLITE_DELETE_ISOLATION_LEVEL
    return DEFAULT_DELETE_ISOLATION_LEVEL


async def init_db(engine: AsyncEngine):
    """Initialize database tables."""
    # Import models so they are registered on Base.metadata
    from clientstore import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping_db(engine: AsyncEngine) -> bool:
    """Check database connectivity."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning(f"Database ping failed: {e}")
        return False


async def close_db(engine: AsyncEngine):
    """Close database connections."""
    await engine.dispose()


# Application engine
engine = build_engine(settings.database_url, echo=settings.debug)
