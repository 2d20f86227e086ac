"""Persisted link snapshot model (UNO: single model)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..link.ExternalLinkRecord import ExternalLinkRecord


class LinkStoreSnapshot(BaseModel):
    """The full versioned record collection as written to disk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    version: int = 0
    last_modified: int = 0
    links: list[ExternalLinkRecord] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _upgrade_plugin_data(cls, values: Any) -> Any:
        """Accept ``{"externalLinks": [...]}`` as written by the original plugin."""
        if isinstance(values, dict) and "links" not in values and "externalLinks" in values:
            values = dict(values)
            values["links"] = values.pop("externalLinks") or []
        return values

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
