"""
Humans API — Settings & Startup Tests
=======================================

What:  Tests for environment-driven settings and the startup lifespan.
Why:   A missing table must stop the service from starting; configuration
       mistakes should fail at load time rather than on first use.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError as PydanticValidationError

from humans_api.config import Settings
from humans_api.database import build_engine
from humans_api.exceptions import DatabaseConnectionError
from humans_api.main import create_app, lifespan
from humans_api.services.human_store import HumanStore


class TestSettings:

    def test_database_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/humans")

        assert Settings().database_url == "postgresql+asyncpg://u:p@db:5432/humans"

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        config = Settings(_env_file=None)

        assert config.backend_port == 8000
        assert config.cors_origins_list == ["*"]
        assert config.log_level == "INFO"

    def test_cors_origins_are_split(self):
        config = Settings(cors_origins="http://a.test, http://b.test,")

        assert config.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="chatty")


class TestLifespan:

    @pytest.mark.asyncio
    async def test_startup_bootstraps_injected_store(self, sqlite_url):
        store = HumanStore(build_engine(sqlite_url))
        app = create_app(store=store)

        async with lifespan(app):
            assert await store.list_humans() == []

    @pytest.mark.asyncio
    async def test_startup_builds_store_from_settings(self, sqlite_url, monkeypatch):
        monkeypatch.setattr("humans_api.main.settings", Settings(database_url=sqlite_url))
        app = create_app()

        async with lifespan(app):
            assert isinstance(app.state.store, HumanStore)
            assert await app.state.store.ping() is True

    @pytest.mark.asyncio
    async def test_startup_fails_without_schema(self, tmp_path):
        missing = tmp_path / "no-such-dir" / "humans.db"
        app = create_app(store=HumanStore(build_engine(f"sqlite+aiosqlite:///{missing}")))

        with pytest.raises(DatabaseConnectionError):
            async with lifespan(app):
                pytest.fail("the application must not start serving")

    @pytest.mark.asyncio
    async def test_startup_timeout_disposes_engine(self):
        engine = MagicMock()
        engine.begin.side_effect = asyncio.TimeoutError()
        engine.dispose = AsyncMock()
        app = create_app(store=HumanStore(engine, session_factory=MagicMock()))

        with pytest.raises(DatabaseConnectionError):
            async with lifespan(app):
                pytest.fail("the application must not start serving")

        engine.dispose.assert_awaited_once()
