"""Root conftest - shared test configuration, database and API client fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test database
    - db_manager patched so the readiness probe sees the test engine
    - Settings come from env vars set here, before the app is imported

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (the budget upsert uses the SQLite ON CONFLICT dialect here)
    - BCRYPT_ROUNDS lowered to the bcrypt minimum to keep the suite fast
"""

import os

# Ensure tests never sign with a real secret or touch a real database
os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production-0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from zenstudent.config import get_settings  # noqa: E402
from zenstudent.db.base import Base  # noqa: E402
import zenstudent.models  # noqa: E402,F401
from zenstudent.infrastructure.database import (  # noqa: E402
    get_db, DatabaseSessionManager,
)
import zenstudent.infrastructure.database as db_module  # noqa: E402
from zenstudent.main import app  # noqa: E402


@pytest.fixture
def settings():
    return get_settings()


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
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def test_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the test engine (keeps error mapping)."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Auth helpers ────────────────────────────────────────────────

async def register_and_login(
    client: AsyncClient, email: str, password: str = "secret123",
    full_name: str = "Test Student",
) -> dict:
    """Register a user, log in, and return the login body plus auth headers."""
    res = await client.post("/api/auth/register", json={
        "fullName": full_name, "email": email, "password": password,
    })
    assert res.status_code == 201, res.text
    res = await client.post("/api/auth/login", json={
        "email": email, "password": password,
    })
    assert res.status_code == 200, res.text
    body = res.json()
    body["headers"] = {"Authorization": f"Bearer {body['token']}"}
    return body


@pytest.fixture
async def alice(client):
    return await register_and_login(client, "alice@example.com", full_name="Alice Doe")


@pytest.fixture
async def bob(client):
    return await register_and_login(client, "bob@example.com", full_name="Bob Roe")


@pytest.fixture
def auth(alice):
    """Authorization headers for the default test user."""
    return alice["headers"]


@pytest.fixture
def register_user(client):
    """Factory fixture: register + log in an extra user by email."""
    async def _register(email: str, password: str = "secret123") -> dict:
        return await register_and_login(client, email, password)
    return _register
