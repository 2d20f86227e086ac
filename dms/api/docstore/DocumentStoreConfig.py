"""Document store configuration management."""

from __future__ import annotations

__all__ = ["DocumentStoreConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentStoreConfig(BaseModel):
    """Document store configuration model."""

    model_config = ConfigDict(extra="forbid")

    type: str = Field(..., description="Document store backend type ('filesystem' or 'memory')")
    base_dir: str = Field("", description="Root directory of the document store (filesystem backend)")

    @field_validator("type")
    @classmethod
    def _known_type(cls, v: str) -> str:
        if v not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {v!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        return v

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str) -> str:
        from ...utils.normalize_path import normalize_path

        return str(normalize_path(v)) if v else v


_BACKEND_REGISTRY = {
    "filesystem": "dms.api.docstore._filesystem",
    "memory": "dms.api.docstore._memory",
}
