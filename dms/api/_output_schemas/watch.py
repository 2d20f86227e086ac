"""Output schemas for watch commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class WatchRunOutput(BaseOutputSchema):
    """Output schema for the foreground watch loop."""

    mirror_root: str = Field(..., description="Document-store directory that was watched")
    events_handled: int = Field(..., description="Number of pull applications performed")
    duration_secs: float = Field(..., description="How long the watch loop ran")


register_output_schema("watch", "run", WatchRunOutput)
