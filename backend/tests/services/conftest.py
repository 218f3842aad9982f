"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db and get_settings dependencies overridden for the test client
    - db_manager patched for the readiness probe, which bypasses get_db

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - blogs_in_db/users_in_db read through a fresh session so results never
      come from the identity map of test_db
"""

import pytest
from sqlalchemy import select
from sqlalchemy.pool import StaticPool
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from httpx import ASGITransport, AsyncClient

from bloglist.config import Settings, get_settings
from bloglist.db.base import Base
from bloglist.db.session import create_session_factory
from bloglist.infrastructure.database import get_db, DatabaseSessionManager
from bloglist.infrastructure.security import create_access_token, hash_password
from bloglist.models.blog import Blog
from bloglist.models.user import User
import bloglist.infrastructure.database as db_module
from bloglist.main import app
from tests.services.blog_samples import INITIAL_BLOGS


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key="test-secret-key",
        log_format="text",
    )


@pytest.fixture
async def client(test_engine, test_session_factory, settings):
    """FastAPI test client with DB and settings dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


async def _create_user(db: AsyncSession, username: str, password: str, name=None) -> User:
    user = User(
        username=username, name=name,
        password_hash=hash_password(password), blogs=[],
    )
    db.add(user)
    await db.commit()
    return user


@pytest.fixture
async def root_user(test_db):
    return await _create_user(test_db, "root", "sekret", name="Superuser")


@pytest.fixture
async def other_user(test_db):
    return await _create_user(test_db, "mallory", "sekret")


@pytest.fixture
def make_token(settings):
    def _make(user: User) -> str:
        return create_access_token(
            user.id, user.username,
            secret_key=settings.secret_key,
            algorithm=settings.jwt_algorithm,
        )
    return _make


@pytest.fixture
def auth_headers(root_user, make_token):
    return {"Authorization": f"Bearer {make_token(root_user)}"}


@pytest.fixture
async def seed_blogs(test_db):
    """Insert the initial blogs (no owner) and return them."""
    blogs = [Blog(**data) for data in INITIAL_BLOGS]
    test_db.add_all(blogs)
    await test_db.commit()
    return blogs


@pytest.fixture
async def owned_blog(test_db, root_user):
    """A blog owned by root_user."""
    blog = Blog(
        title="Space blog", author="Jaska Jokinen",
        url="http//blog.spaceblog.com", likes=45, user_id=root_user.id,
    )
    test_db.add(blog)
    await test_db.commit()
    return blog


@pytest.fixture
def blogs_in_db(test_session_factory):
    async def _read() -> list[Blog]:
        async with test_session_factory() as session:
            result = await session.execute(select(Blog))
            return list(result.scalars().all())
    return _read


@pytest.fixture
def users_in_db(test_session_factory):
    async def _read() -> list[User]:
        async with test_session_factory() as session:
            result = await session.execute(select(User))
            return list(result.scalars().all())
    return _read
