from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Seeder settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_path: Path = Field(default=Path("data/kuma.db"))

    # Seeding
    mock_server_base: str = Field(default="http://host.docker.internal:3000")
    default_user_id: int = Field(default=1, ge=1)
    default_timeout: float = Field(default=48.0, gt=0)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = False

    @field_validator("mock_server_base")
    @classmethod
    def validate_mock_server_base(cls, v: str) -> str:
        """Require an http(s) URL with a host so the clear prefix stays narrow."""
        v = v.strip()
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"mock_server_base must be an http(s) URL with a host, got {v!r}")
        if parts.query or parts.fragment:
            raise ValueError("mock_server_base must not carry a query string or fragment")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
