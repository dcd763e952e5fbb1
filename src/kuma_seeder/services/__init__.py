from __future__ import annotations

from kuma_seeder.services.purge_service import PurgeService
from kuma_seeder.services.seed_runner import RunMode, run_seeder
from kuma_seeder.services.seed_service import SeedService

__all__ = [
    "PurgeService",
    "SeedService",
    "RunMode",
    "run_seeder",
]
