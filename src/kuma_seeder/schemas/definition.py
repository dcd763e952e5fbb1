from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MonitorDefinition(BaseModel):
    """A monitor the seeder makes sure exists."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=150)
    path: str = Field(..., min_length=1)
    description: str = Field(default="")
    timeout: float | None = Field(default=None, gt=0)
    keyword: str | None = Field(default=None, min_length=1)

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Paths are appended to the base URL and must be absolute."""
        if not v.startswith("/"):
            raise ValueError(f"path must start with '/', got {v!r}")
        return v
