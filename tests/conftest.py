"""Pytest configuration and fixtures for device-backend.

SECRET_KEY and DATABASE_URL are set before anything imports app.main, so the
module-level app builds with test values. API tests get their own app over a
fresh SQLite file (aiosqlite) with tables created and reference data seeded.
"""

import json
import os
from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./device-backend-test.db")

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.main import create_app
from scripts.seed_reference_data import seed_reference_data

TEST_SECRET_KEY = "test-secret-key-not-for-production"
REFERENCE_DATA = Path(__file__).resolve().parent.parent / "docs" / "reference-data.json"

Registrar = Callable[..., Awaitable[tuple[int, dict[str, str]]]]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings for one test: private SQLite file, fixed secret, no .env."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        secret_key=TEST_SECRET_KEY,
    )


@pytest.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    """App with tables created and reference data loaded. Pools disposed after the test."""
    application = create_app(settings)
    database = application.state.context.database
    await database.create_all()
    with REFERENCE_DATA.open() as f:
        data = json.load(f)
    async with database.writer_session() as session:
        await seed_reference_data(session, data)
    yield application
    await database.dispose()


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def register(client: AsyncClient) -> Registrar:
    """Sign up an account and log in; returns (account_id, auth headers)."""

    async def _register(
        email: str, password: str = "pw", name: str = "Test Account"
    ) -> tuple[int, dict[str, str]]:
        created = await client.post(
            "/api/account",
            json={
                "email": email,
                "password": password,
                "name": name,
                "receivesUpdates": False,
            },
        )
        assert created.status_code == 201, created.text
        login = await client.post(
            "/api/login", json={"email": email, "password": password}
        )
        assert login.status_code == 201, login.text
        token = login.json()["token"]
        return created.json()["id"], {"Authorization": f"Bearer {token}"}

    return _register


@pytest.fixture
async def model_id(client: AsyncClient, register: Registrar) -> int:
    """Id of the first seeded device model."""
    _, headers = await register("models@x.com")
    response = await client.get("/api/model/list", headers=headers)
    assert response.status_code == 200
    return response.json()["data"][0]["id"]
