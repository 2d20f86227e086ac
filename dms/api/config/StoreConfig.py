"""Snapshot store configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StoreConfig(BaseModel):
    """Where the link snapshot file lives."""

    model_config = ConfigDict(extra="forbid")

    path: str = Field(..., description="Path to the JSON snapshot file")

    @field_validator("path")
    @classmethod
    def _normalize_path(cls, v: str) -> str:
        from ...utils.normalize_path import normalize_path

        if not v.strip():
            raise ValueError("store.path must not be empty")
        return str(normalize_path(v))
