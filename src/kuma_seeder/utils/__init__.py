from __future__ import annotations

from kuma_seeder.utils.exceptions import (
    ConfigurationError,
    DatabaseNotFoundError,
    DuplicateDefinitionError,
    PurgeError,
    SeedAbortedError,
    SeederException,
    StorageError,
)
from kuma_seeder.utils.logging import get_logger, setup_logging
from kuma_seeder.utils.urls import build_target_url, managed_prefix

__all__ = [
    "setup_logging",
    "get_logger",
    "build_target_url",
    "managed_prefix",
    "SeederException",
    "ConfigurationError",
    "DatabaseNotFoundError",
    "DuplicateDefinitionError",
    "StorageError",
    "SeedAbortedError",
    "PurgeError",
]
