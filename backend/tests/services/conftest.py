"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - Seeded users go through UserService, so passwords are real bcrypt hashes

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - bcrypt rounds lowered to 4: hashing cost dominates otherwise
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from todo_app.config import Settings
from todo_app.db.base import Base
from todo_app.infrastructure.database import get_db, DatabaseSessionManager
from todo_app.infrastructure.password_hasher import PasswordHasher
from todo_app.services.bootstrap import seed_admin
from todo_app.services.task_service import TaskService
from todo_app.services.user_service import UserService
import todo_app.infrastructure.database as db_module
import todo_app.models  # noqa: F401
from todo_app.main import app

ALICE = ("Alice", "alice@example.com", "password123")
BOB = ("Bob", "bob@example.com", "hunter22")
ADMIN = ("root", "root@example.com", "admin-secret")


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def user_service(test_db, hasher):
    return UserService(test_db, hasher)


@pytest.fixture
def task_service(test_db):
    return TaskService(test_db)


@pytest.fixture
async def alice(user_service):
    return await user_service.create_user(*ALICE)


@pytest.fixture
async def bob(user_service):
    return await user_service.create_user(*BOB)


@pytest.fixture
async def admin(test_db, hasher):
    username, email, password = ADMIN
    settings = Settings(
        admin_username=username, admin_email=email, admin_password=password,
    )
    await seed_admin(test_db, settings, hasher)
    return await UserService(test_db, hasher).get_user(
        await UserService(test_db, hasher).get_user_id_by_username(username),
    )


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

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
