from __future__ import annotations

from enum import Enum
from typing import Sequence

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from kuma_seeder.catalogue import MONITOR_CATALOGUE, validate_catalogue
from kuma_seeder.config import Settings
from kuma_seeder.schemas.definition import MonitorDefinition
from kuma_seeder.schemas.summary import RunReport
from kuma_seeder.services.purge_service import PurgeService
from kuma_seeder.services.seed_service import SeedService

logger = structlog.get_logger(__name__)


class RunMode(str, Enum):
    """How a run treats monitors left over from earlier runs."""

    SEED_ONLY = "seed"
    CLEAR_THEN_SEED = "clear"
    FORCE = "force"

    @classmethod
    def from_flags(cls, clear: bool = False, force: bool = False) -> RunMode:
        """Map the command line flags to a mode. ``--force`` wins if both are set."""
        if force:
            return cls.FORCE
        if clear:
            return cls.CLEAR_THEN_SEED
        return cls.SEED_ONLY

    @property
    def clears_first(self) -> bool:
        # --force and --clear are aliases
        return self is not RunMode.SEED_ONLY


async def run_seeder(
    session_factory: async_sessionmaker[AsyncSession],
    settings: Settings,
    mode: RunMode = RunMode.SEED_ONLY,
    catalogue: Sequence[MonitorDefinition] = MONITOR_CATALOGUE,
) -> RunReport:
    """
    Run the clear and seed steps for ``mode`` on one session.

    Args:
        session_factory: Factory bound to the monitoring database
        settings: Seeder settings
        mode: Selected run mode
        catalogue: Definitions to seed

    Returns:
        Report of the run

    Raises:
        DuplicateDefinitionError: If the catalogue is inconsistent
        StorageError: If any database step fails
    """
    validate_catalogue(catalogue)

    base_url = settings.mock_server_base
    deleted: int | None = None

    async with session_factory() as db:
        if mode.clears_first:
            deleted = await PurgeService(db).clear(base_url)

        seed_service = SeedService(
            db,
            user_id=settings.default_user_id,
            default_timeout=settings.default_timeout,
        )
        summary = await seed_service.seed(catalogue, base_url)

    logger.info("total_monitors", count=summary.total_monitors)

    return RunReport(
        mode=mode.value,
        deleted=deleted,
        seed=summary,
        total_monitors=summary.total_monitors,
    )
