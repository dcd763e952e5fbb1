from __future__ import annotations

from kuma_seeder.schemas.definition import MonitorDefinition
from kuma_seeder.schemas.summary import (
    RunReport,
    SeedOutcome,
    SeedResult,
    SeedSummary,
)

__all__ = [
    "MonitorDefinition",
    "SeedOutcome",
    "SeedResult",
    "SeedSummary",
    "RunReport",
]
