"""Route test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database seeded with the language fixture
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness check sees the test engine
    - register_user / auth_headers build real sessions through the public API;
      enroll / add_category / add_word build vocabulary the same way

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features are not exercised here)
    - Settings overrides go through app.dependency_overrides[get_settings]
      instead of mutating process env
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import wordbank.models  # noqa: F401  (registers every table on Base.metadata)
from wordbank.config import Settings, get_settings
from wordbank.db.base import Base
from wordbank.infrastructure.database import get_db, DatabaseSessionManager
import wordbank.infrastructure.database as db_module
from wordbank.main import app
from wordbank.services.testing_reset_service import seed_languages

ADMIN_TOKEN = "test-admin-token"
PASSWORD = "correct9horse"


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
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        await seed_languages(session)
        await session.commit()
    return factory


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def settings_override():
    """Swap the Settings every route sees. Returns a setter."""
    def _set(**overrides):
        settings = Settings(
            environment=overrides.pop("environment", "test"),
            test_admin_token=overrides.pop("test_admin_token", ADMIN_TOKEN),
            **overrides,
        )
        app.dependency_overrides[get_settings] = lambda: settings
        return settings
    return _set


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


@pytest.fixture
def register_user(client):
    """Register through the API. Returns (access_token, user_id)."""
    async def _register(email: str, language: str = "en", password: str = PASSWORD):
        response = await client.post("/api/v1/auth/register", json={
            "email": email,
            "password": password,
            "preferredLanguageId": language,
        })
        assert response.status_code == 201, response.text
        data = response.json()["data"]
        return data["session"]["accessToken"], data["userId"]
    return _register


@pytest.fixture
def auth_headers():
    def _headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def enroll(client, auth_headers):
    """Start learning a language. Returns the enrollment data."""
    async def _enroll(token: str, language_id: str):
        response = await client.post(
            "/api/v1/learning-languages",
            json={"languageId": language_id},
            headers=auth_headers(token),
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _enroll


@pytest.fixture
def add_category(client, auth_headers):
    async def _add(token: str, learning_language_id: str, name: str):
        response = await client.post(
            f"/api/v1/learning-languages/{learning_language_id}/categories",
            json={"name": name},
            headers=auth_headers(token),
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _add


@pytest.fixture
def add_word(client, auth_headers):
    async def _add(token: str, category_id: str, term: str, translation: str):
        response = await client.post(
            f"/api/v1/categories/{category_id}/words",
            json={"term": term, "translation": translation},
            headers=auth_headers(token),
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _add
