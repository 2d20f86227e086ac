"""Output schemas for sync commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class SyncOutput(BaseOutputSchema):
    """Output schema for the full resync command."""

    documents_written: int = Field(..., description="Number of proxy documents regenerated")
    records: int = Field(..., description="Number of records in the store")
    version: int = Field(..., description="Snapshot version after the resync")
    sync_duration_ms: int = Field(..., description="Wall-clock duration of the resync")


register_output_schema("sync", "sync", SyncOutput)
