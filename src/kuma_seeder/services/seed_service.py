from __future__ import annotations

from typing import Iterable

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kuma_seeder.models.monitor import SEEDED_MONITOR_DEFAULTS, Monitor
from kuma_seeder.schemas.definition import MonitorDefinition
from kuma_seeder.schemas.summary import SeedOutcome, SeedResult, SeedSummary
from kuma_seeder.utils.exceptions import SeedAbortedError, StorageError
from kuma_seeder.utils.urls import build_target_url

logger = structlog.get_logger(__name__)


class SeedService:
    """Adds catalogue monitors that are missing from the database."""

    def __init__(self, db: AsyncSession, user_id: int, default_timeout: float):
        self.db = db
        self.user_id = user_id
        self.default_timeout = default_timeout

    async def find_monitor_id(self, url: str) -> int | None:
        """
        Look up a monitor by its exact URL.

        Args:
            url: Fully-qualified target URL

        Returns:
            ID of the first matching monitor, None if there is none
        """
        stmt = select(Monitor.id).where(Monitor.url == url).order_by(Monitor.id).limit(1)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    def build_monitor(self, definition: MonitorDefinition, url: str) -> Monitor:
        """
        Build a new monitor row for a definition.

        Args:
            definition: Catalogue entry
            url: Target URL computed for the entry

        Returns:
            Unsaved monitor
        """
        timeout = definition.timeout if definition.timeout is not None else self.default_timeout
        return Monitor(
            name=definition.name,
            user_id=self.user_id,
            url=url,
            timeout=timeout,
            description=definition.description,
            keyword=definition.keyword,
            **SEEDED_MONITOR_DEFAULTS,
        )

    async def count_monitors(self) -> int:
        """Count every monitor in the database, seeded or not."""
        try:
            result = await self.db.execute(select(func.count(Monitor.id)))
        except SQLAlchemyError as exc:
            raise StorageError("count", str(exc)) from exc
        return result.scalar() or 0

    async def seed(
        self,
        catalogue: Iterable[MonitorDefinition],
        base_url: str,
    ) -> SeedSummary:
        """
        Insert every definition whose URL is not in the database yet.

        Existing rows are never modified. Each insert is committed on its
        own, so rows written before a failure stay written.

        Args:
            catalogue: Definitions in processing order
            base_url: Mock server base URL

        Returns:
            Per-definition outcomes and the monitor count afterwards

        Raises:
            SeedAbortedError: If a lookup or insert fails
        """
        results: list[SeedResult] = []

        for definition in catalogue:
            url = build_target_url(base_url, definition.path)
            try:
                result = await self._reconcile(definition, url)
            except SQLAlchemyError as exc:
                await self.db.rollback()
                logger.error(
                    "monitor_seed_failed",
                    name=definition.name,
                    url=url,
                    error=str(exc),
                )
                raise SeedAbortedError(definition.name, str(exc), results) from exc
            results.append(result)

        summary = SeedSummary(results=results, total_monitors=await self.count_monitors())

        logger.info(
            "seed_summary",
            inserted=summary.inserted,
            skipped=summary.skipped,
        )

        return summary

    async def _reconcile(self, definition: MonitorDefinition, url: str) -> SeedResult:
        existing_id = await self.find_monitor_id(url)
        if existing_id is not None:
            logger.info(
                "monitor_skipped",
                name=definition.name,
                monitor_id=existing_id,
                reason="already exists",
            )
            return SeedResult(
                name=definition.name,
                url=url,
                outcome=SeedOutcome.SKIPPED,
                monitor_id=existing_id,
            )

        monitor = self.build_monitor(definition, url)
        self.db.add(monitor)
        await self.db.commit()

        logger.info(
            "monitor_inserted",
            name=definition.name,
            monitor_id=monitor.id,
            url=url,
        )
        return SeedResult(
            name=definition.name,
            url=url,
            outcome=SeedOutcome.INSERTED,
            monitor_id=monitor.id,
        )
