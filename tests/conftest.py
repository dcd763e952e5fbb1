"""
Pytest configuration and shared fixtures.

Uses SQLite in-memory via aiosqlite, the same driver the seeder uses against
the Uptime Kuma database file. The ``monitor`` table is created from the ORM
metadata because the seeder itself never creates it.
"""
from __future__ import annotations

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from kuma_seeder.config import Settings, get_settings
from kuma_seeder.models.base import Base
from kuma_seeder.schemas.definition import MonitorDefinition

SQLITE_URL = "sqlite+aiosqlite:///:memory:"
BASE_URL = "http://x/"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; tests change the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create a fresh in-memory SQLite engine per test function."""
    engine = create_async_engine(
        SQLITE_URL,
        connect_args={"check_same_thread": False},
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope="function")
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Provide an async session bound to the in-memory database."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        mock_server_base=BASE_URL,
        default_user_id=1,
        default_timeout=48.0,
    )


@pytest.fixture
def two_definitions() -> tuple[MonitorDefinition, ...]:
    return (
        MonitorDefinition(name="Always Up", path="/always-up", description="Always returns 200 OK"),
        MonitorDefinition(name="Always Down", path="/always-down", description="Always returns 500 error"),
    )


@pytest_asyncio.fixture
async def foreign_monitor(test_db: AsyncSession):
    """A monitor the seeder did not create."""
    from kuma_seeder.models.monitor import Monitor

    monitor = Monitor(
        name="Production API",
        url="https://api.example.com/health",
        user_id=1,
        timeout=30,
        monitor_type="http",
    )
    test_db.add(monitor)
    await test_db.commit()
    await test_db.refresh(monitor)
    return monitor
