"""Unit tests for DatabaseManager table lifecycle."""

import pytest
from sqlalchemy import inspect

from webman.core.config import Settings
from webman.infrastructure.persistence.database import DatabaseManager, _sqlite_database_path


async def _table_names(manager: DatabaseManager) -> set[str]:
    async with manager.engine.connect() as conn:
        return set(await conn.run_sync(lambda c: inspect(c).get_table_names()))


@pytest.mark.asyncio
async def test_create_and_drop_tables(tmp_path):
    manager = DatabaseManager()
    manager.settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path}/webman.db")

    try:
        await manager.create_tables()
        assert {"collections", "requests", "default_headers"} <= await _table_names(manager)
        assert await manager.check_connection() is True

        await manager.drop_tables()
        assert await _table_names(manager) == set()
    finally:
        await manager.disconnect()

    assert manager._engine is None


def test_sqlite_database_path():
    assert str(_sqlite_database_path("sqlite+aiosqlite:///./data/webman.db")) == "data/webman.db"
    assert _sqlite_database_path("sqlite+aiosqlite:///:memory:") is None
    assert _sqlite_database_path("postgresql+asyncpg://u:p@host/db") is None
