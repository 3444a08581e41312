"""Pytest configuration and fixtures."""

import os
import uuid

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app modules
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./matty_test.db")

from matty.core.config import Settings  # noqa: E402
from matty.core.db import create_session_factory, init_models  # noqa: E402
from matty.core.security import create_access_token  # noqa: E402
from matty.main import create_app  # noqa: E402

TEST_SECRET = "unit-test-secret"


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temporary SQLite database."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        jwt_secret=TEST_SECRET,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client; the context manager runs startup (tables are created)."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(settings):
    """Build an Authorization header for the given account id."""

    def make(owner_id: uuid.UUID) -> dict:
        token = create_access_token(owner_id, settings)
        return {"Authorization": f"Bearer {token}"}

    return make


@pytest.fixture
def alice():
    return uuid.uuid4()


@pytest.fixture
def bob():
    return uuid.uuid4()


@pytest_asyncio.fixture
async def session():
    """Session over an in-memory SQLite database with the schema created."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await init_models(engine)
    factory = create_session_factory(engine)

    async with factory() as s:
        yield s

    await engine.dispose()
