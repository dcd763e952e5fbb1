from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import structlog
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from kuma_seeder.utils.exceptions import DatabaseNotFoundError

logger = structlog.get_logger(__name__)


def build_database_url(path: Path) -> str:
    """Build the aiosqlite URL for a database file."""
    return f"sqlite+aiosqlite:///{path}"


def create_engine(path: Path, echo: bool = False) -> AsyncEngine:
    """Create an async engine bound to an existing SQLite file."""
    return create_async_engine(build_database_url(path), echo=echo)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used for a seeding run."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def open_database(
    path: Path,
    echo: bool = False,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """
    Open the monitoring database for the duration of a run.

    SQLite silently creates missing files, so existence is checked before an
    engine is built. The engine is disposed on every exit path.

    Args:
        path: Location of the SQLite file
        echo: Echo SQL statements

    Yields:
        async_sessionmaker: Session factory bound to the database

    Raises:
        DatabaseNotFoundError: If the file does not exist
    """
    if not path.is_file():
        raise DatabaseNotFoundError(path)

    engine = create_engine(path, echo=echo)
    logger.debug("database_opened", path=str(path))
    try:
        yield create_session_factory(engine)
    finally:
        await engine.dispose()
        logger.debug("database_closed", path=str(path))
