"""
Humans API — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── sqlite_url: file-backed SQLite database in a per-test temp dir
    ├── store: real HumanStore over that database, table bootstrapped
    ├── mock_store: AsyncMock standing in for HumanStore
    ├── test_client: HTTPX AsyncClient for an app served from `store`
    └── mock_client: HTTPX AsyncClient for an app served from `mock_store`

The HTTP clients use ASGITransport, which does not run the app lifespan;
the fixtures bootstrap the store themselves.
"""

import os
from unittest.mock import AsyncMock

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test-humans.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "*"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from humans_api.database import build_engine
from humans_api.main import create_app
from humans_api.services.human_store import HumanStore


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'humans.db'}"


@pytest_asyncio.fixture
async def store(sqlite_url):
    """
    A HumanStore over a fresh SQLite database with the table created.

    Usage:
        async def test_create(store):
            human = await store.create_human("Ada", "Lovelace")
    """
    human_store = HumanStore(build_engine(sqlite_url))
    await human_store.bootstrap()
    yield human_store
    await human_store.dispose()


@pytest.fixture
def mock_store():
    """
    Provides a mock HumanStore.

    Every coroutine method is an AsyncMock, so tests set return values or
    side effects directly:
        mock_store.get_human.return_value = None
    """
    return AsyncMock(spec=HumanStore)


def _client_for(human_store) -> AsyncClient:
    app = create_app(store=human_store)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(store):
    """
    HTTPX AsyncClient talking to an app backed by the SQLite store.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/humans")
            assert response.status_code == 200
    """
    async with _client_for(store) as client:
        yield client


@pytest_asyncio.fixture
async def mock_client(mock_store):
    """HTTPX AsyncClient talking to an app backed by `mock_store`."""
    async with _client_for(mock_store) as client:
        yield client
