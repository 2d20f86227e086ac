"""External link record model (UNO: single model)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# Fields a pull may overwrite from an edited proxy document
PULL_FIELDS = ("title", "categories", "audience", "tags", "notes", "summary")


def _iso_to_ms(value: Any) -> int | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        return int(datetime.fromisoformat(value.replace("Z", "+00:00")).timestamp() * 1000)
    except ValueError:
        return None


class ExternalLinkRecord(BaseModel):
    """One catalog entry describing an external resource.

    Attributes are snake_case; the snapshot JSON uses camelCase aliases
    (``fileType``, ``createdDate``, ``lastModified``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    title: str
    path: str
    categories: list[str] = Field(default_factory=list)
    audience: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    notes: str = ""
    summary: str = ""
    file_type: str = ""
    size: int = 0
    created_date: int = 0
    last_modified: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _upgrade_legacy_fields(cls, values: Any) -> Any:
        """Accept records written by the original plugin (single category, ISO dates)."""
        if not isinstance(values, dict):
            return values
        values = dict(values)
        legacy_category = values.pop("category", None)
        if legacy_category and not values.get("categories"):
            values["categories"] = [legacy_category]
        date_added = _iso_to_ms(values.pop("dateAdded", None))
        if date_added is not None and not values.get("createdDate") and not values.get("created_date"):
            values["createdDate"] = date_added
        date_modified = _iso_to_ms(values.pop("dateModified", None))
        if date_modified is not None and values.get("lastModified") is None and values.get("last_modified") is None:
            values["lastModified"] = date_modified
        return values

    @property
    def modified_ms(self) -> int:
        """``last_modified`` with absent treated as 0, for merge comparisons."""
        return self.last_modified or 0

    def to_json(self) -> dict[str, Any]:
        """Snapshot JSON form (camelCase keys)."""
        return self.model_dump(mode="json", by_alias=True)

    def same_content(self, other: ExternalLinkRecord) -> bool:
        """Equal in every field except ``last_modified``."""
        return self.model_dump(exclude={"last_modified"}) == other.model_dump(exclude={"last_modified"})
