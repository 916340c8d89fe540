# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Environment variables must be set before app.core.config is imported,
# because settings are loaded at import time.
# Every test gets its own SQLite file; get_db is overridden to use it.
# =============================================================================

import asyncio
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./unused-test.db")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-posts-api")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.core.db import create_tables, get_db
from app.main import app


USER_CREDENTIALS = {
    "email": "author@posts.io",
    "username": "author",
    "password": "Secret123",
}


# =============================================================================
# Database
# =============================================================================

@pytest.fixture
def db_engine(tmp_path):
    """Async engine over a fresh SQLite file with all tables created."""
    # NullPool: connections are never reused across event loops
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        poolclass=NullPool,
    )
    asyncio.run(create_tables(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest.fixture
def run_db(session_factory):
    """
    Run ``func(session)`` against the test database and return its result.

    Used to inspect or prepare database state outside of HTTP requests.
    """
    def run(func):
        async def runner():
            async with session_factory() as session:
                return await func(session)
        return asyncio.run(runner())

    return run


# =============================================================================
# HTTP client
# =============================================================================

@pytest.fixture
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user_credentials():
    return dict(USER_CREDENTIALS)


@pytest.fixture
def registered_user(client, user_credentials):
    response = client.post("/api/auth/register", json=user_credentials)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def access_token(client, registered_user, user_credentials):
    response = client.post(
        "/api/auth/login",
        json={"email": user_credentials["email"], "password": user_credentials["password"]},
    )
    assert response.status_code == 200
    return response.json()["access_token"]


@pytest.fixture
def auth_headers(access_token):
    return {"Authorization": f"Bearer {access_token}"}
