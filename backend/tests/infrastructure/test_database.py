"""Database Session Manager — schema bootstrap and error mapping.

Invariants:
    - create_schema() is idempotent (create-if-absent)
    - SQLAlchemy errors inside a session surface as DatabaseError
    - get_db refuses to run before init_db
"""

import pytest
from sqlalchemy import text

import blog_api.infrastructure.database as db_module
from blog_api.core.errors import DatabaseError
from blog_api.infrastructure.database import DatabaseSessionManager, get_db


@pytest.fixture
async def manager(tmp_path):
    mgr = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}")
    yield mgr
    await mgr.dispose()


async def test_create_schema_is_idempotent(manager):
    await manager.create_schema()
    await manager.create_schema()

    async with manager.session() as db:
        result = await db.execute(
            text("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name"),
        )
        tables = {row[0] for row in result}

    assert {"users", "blogs"} <= tables


async def test_create_schema_keeps_existing_rows(manager):
    await manager.create_schema()
    async with manager.session() as db:
        await db.execute(text("INSERT INTO users (name, email) VALUES ('A', 'a@a.com')"))
        await db.commit()

    await manager.create_schema()

    async with manager.session() as db:
        count = (await db.execute(text("SELECT COUNT(*) FROM users"))).scalar_one()
    assert count == 1


async def test_operational_error_maps_to_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))

    assert exc_info.value.operation == "execute"


async def test_get_db_requires_initialization(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)

    with pytest.raises(RuntimeError):
        async for _ in get_db():
            pass


async def test_init_and_close_db(tmp_path, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)

    mgr = db_module.init_db(f"sqlite+aiosqlite:///{tmp_path / 'x.db'}")
    assert db_module.db_manager is mgr

    await db_module.close_db()
    assert db_module.db_manager is None
