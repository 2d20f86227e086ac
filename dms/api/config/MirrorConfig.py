"""Proxy document mirror configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CATEGORIES = ["Work", "Personal", "Research", "Other"]
DEFAULT_AUDIENCES = ["Self", "Team", "Client", "Public"]


class MirrorConfig(BaseModel):
    """Layout of proxy documents inside the document store."""

    model_config = ConfigDict(extra="forbid")

    root: str = Field("DMS", description="Directory (relative to the document store) holding proxy documents")
    extension: str = Field("md", description="File extension of proxy documents, without the dot")
    tag_registry: str = Field("dms-tags.md", description="Document holding the registered tag list")
    drive: str | None = Field(None, description="Root qualifier injected into rootless local paths (e.g. 'C:')")
    categories: list[str] = Field(default_factory=lambda: list(DEFAULT_CATEGORIES))
    audiences: list[str] = Field(default_factory=lambda: list(DEFAULT_AUDIENCES))

    @field_validator("root")
    @classmethod
    def _strip_root(cls, v: str) -> str:
        # "" and "/" both mean the document store root
        return v.strip().strip("/")

    @field_validator("extension")
    @classmethod
    def _strip_extension(cls, v: str) -> str:
        ext = v.strip().lstrip(".")
        if not ext:
            raise ValueError("mirror.extension must not be empty")
        return ext
