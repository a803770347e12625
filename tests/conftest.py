"""
Pytest configuration and fixtures for Clientstore tests.

Every test gets its own SQLite database file under tmp_path.
"""
import pytest
from sqlalchemy import event

from clientstore.database import build_engine, init_db, close_db
from clientstore.repositories import DownloadClientRepository


@pytest.fixture
async def engine(tmp_path):
    """Async engine on a fresh database with all tables created."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'clientstore.db'}")
    await init_db(engine)
    yield engine
    await close_db(engine)


@pytest.fixture
def repo(engine):
    """Repository with default (write-only) cache policy."""
    return DownloadClientRepository(engine)


@pytest.fixture
def statements(engine):
    """SQL statements sent to the database while the test runs."""
    seen = []

    def record(conn, cursor, statement, parameters, context, executemany):
        seen.append(statement)

    event.listen(engine.sync_engine, "before_cursor_execute", record)
    yield seen
    event.remove(engine.sync_engine, "before_cursor_execute", record)
