"""Database Sessions: rollback and error mapping in DatabaseSessionManager.

Invariants:
    - A SQLAlchemy failure inside session() is rolled back and re-raised as DatabaseError
    - Domain errors raised inside session() pass through unchanged
    - get_db refuses to hand out sessions before init_db
"""

import pytest
from sqlalchemy import func, select, text
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

import bloglist.infrastructure.database as db_module
from bloglist.core.errors import DatabaseError, ResourceNotFoundError
from bloglist.db.base import Base
from bloglist.infrastructure.database import (
    DatabaseSessionManager, _as_database_error, get_db, init_db,
)
from bloglist.models.user import User


@pytest.fixture
async def manager():
    mgr = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with mgr.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield mgr
    await mgr.close()


@pytest.fixture
def rollbacks(monkeypatch):
    """Record every AsyncSession.rollback call."""
    calls = []
    original = AsyncSession.rollback

    async def recording_rollback(self):
        calls.append(self)
        await original(self)

    monkeypatch.setattr(AsyncSession, "rollback", recording_rollback)
    return calls


async def test_failing_query_becomes_database_error(manager, rollbacks):
    """A statement against a missing table surfaces as a rolled-back DatabaseError."""
    with pytest.raises(DatabaseError) as exc:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))

    assert exc.value.message == "Database execute failed: Connection or operational error"
    assert exc.value.http_status == 503
    assert len(rollbacks) == 1


async def test_integrity_violation_rolls_back_whole_unit(manager, rollbacks):
    """A duplicate username aborts the commit; neither row is kept."""
    with pytest.raises(DatabaseError) as exc:
        async with manager.session() as db:
            db.add(User(username="twin", password_hash="x", blogs=[]))
            db.add(User(username="twin", password_hash="y", blogs=[]))
            await db.commit()

    assert exc.value.operation == "commit"
    assert exc.value.message == "Database commit failed: Integrity constraint violated"
    assert len(rollbacks) == 1

    async with manager.session() as db:
        count = await db.scalar(select(func.count()).select_from(User))
    assert count == 0


async def test_domain_errors_pass_through(manager, rollbacks):
    """Non-database exceptions keep their type and are not rolled back by the manager."""
    with pytest.raises(ResourceNotFoundError):
        async with manager.session():
            raise ResourceNotFoundError("Blog", "b1")
    assert rollbacks == []


@pytest.mark.parametrize(
    "error, operation",
    [
        (IntegrityError("INSERT", {}, Exception("dup")), "commit"),
        (OperationalError("SELECT", {}, Exception("down")), "execute"),
        (DBAPIError("SELECT", {}, Exception("driver")), "query"),
        (SQLAlchemyError("other"), "unknown"),
    ],
)
def test_error_map_picks_most_specific(error, operation):
    """Each SQLAlchemy error family maps to its own operation label."""
    assert _as_database_error(error).operation == operation


async def test_health_check(manager):
    """A working engine reports healthy."""
    assert await manager.health_check() is True


async def test_get_db_before_init_raises(monkeypatch):
    """Without init_db the dependency fails with DatabaseError instead of a bare crash."""
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(DatabaseError):
        async for _ in get_db():
            pass


async def test_get_db_yields_managed_session(monkeypatch):
    """After init_db, get_db hands out a working session."""
    monkeypatch.setattr(db_module, "db_manager", None)
    mgr = init_db("sqlite+aiosqlite:///:memory:")
    try:
        async for db in get_db():
            assert await db.scalar(text("SELECT 1")) == 1
    finally:
        await mgr.close()
