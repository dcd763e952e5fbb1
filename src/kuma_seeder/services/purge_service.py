from __future__ import annotations

import structlog
from sqlalchemy import delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kuma_seeder.models.monitor import Monitor
from kuma_seeder.utils.exceptions import PurgeError
from kuma_seeder.utils.urls import managed_prefix

logger = structlog.get_logger(__name__)


class PurgeService:
    """Removes monitors that point at the mock server."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def clear(self, base_url: str) -> int:
        """
        Delete every monitor whose URL lies under ``base_url``.

        Matching is on the URL prefix alone; the catalogue is not consulted.
        The prefix is compared exactly (case-sensitive, no wildcards), unlike
        SQLite's LIKE.

        Args:
            base_url: Mock server base URL

        Returns:
            Number of deleted monitors

        Raises:
            PurgeError: If the delete fails
        """
        prefix = managed_prefix(base_url)
        stmt = (
            delete(Monitor)
            .where(func.substr(Monitor.url, 1, len(prefix)) == prefix)
            .execution_options(synchronize_session=False)
        )

        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.error("monitors_clear_failed", prefix=prefix, error=str(exc))
            raise PurgeError(base_url, str(exc)) from exc

        deleted = result.rowcount or 0
        logger.info("monitors_cleared", deleted=deleted, prefix=prefix)
        return deleted
