from __future__ import annotations

from kuma_seeder.models.base import Base
from kuma_seeder.models.monitor import SEEDED_MONITOR_DEFAULTS, Monitor

__all__ = [
    "Base",
    "Monitor",
    "SEEDED_MONITOR_DEFAULTS",
]
