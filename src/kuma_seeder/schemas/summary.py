from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class SeedOutcome(str, Enum):
    """What happened to a single definition."""

    INSERTED = "inserted"
    SKIPPED = "skipped"


class SeedResult(BaseModel):
    """Outcome of reconciling one definition."""

    name: str
    url: str
    outcome: SeedOutcome
    monitor_id: int | None = None


class SeedSummary(BaseModel):
    """Result of a seed operation."""

    results: list[SeedResult] = Field(default_factory=list)
    total_monitors: int = 0

    @computed_field
    @property
    def inserted(self) -> int:
        return sum(1 for r in self.results if r.outcome == SeedOutcome.INSERTED)

    @computed_field
    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.outcome == SeedOutcome.SKIPPED)


class RunReport(BaseModel):
    """Everything a run did, in order."""

    mode: str
    deleted: int | None = None
    seed: SeedSummary
    total_monitors: int
