from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kuma_seeder.schemas.summary import SeedResult


class SeederException(Exception):
    """Base exception for the monitor seeder."""

    step = "seed"


class ConfigurationError(SeederException):
    """Raised when settings cannot be loaded."""

    step = "configure"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")


class DatabaseNotFoundError(SeederException):
    """Raised when the monitoring database file does not exist."""

    step = "open_database"

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Database not found at: {path}")


class DuplicateDefinitionError(SeederException):
    """Raised when two catalogue entries share a path or a name."""

    step = "validate_catalogue"

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Duplicate monitor definition {field}: {value!r}")


class StorageError(SeederException):
    """Raised when a database read or write fails."""

    def __init__(self, step: str, reason: str):
        self.step = step
        self.reason = reason
        super().__init__(f"Storage failure during {step}: {reason}")


class SeedAbortedError(StorageError):
    """Raised when seeding stops part way through the catalogue."""

    def __init__(self, definition: str, reason: str, completed: list[SeedResult]):
        self.definition = definition
        self.completed = completed
        super().__init__("seed", reason)
        self.args = (f"Seeding aborted at {definition!r}: {reason}",)

    @property
    def inserted(self) -> list[str]:
        """Names inserted before the failure."""
        return [r.name for r in self.completed if r.outcome == "inserted"]


class PurgeError(StorageError):
    """Raised when clearing seeded monitors fails."""

    def __init__(self, base_url: str, reason: str):
        self.base_url = base_url
        super().__init__("clear", reason)
