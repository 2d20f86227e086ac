"""Change watcher configuration."""

from pydantic import BaseModel, ConfigDict, Field


class WatchConfig(BaseModel):
    """Timing knobs for the pull direction."""

    model_config = ConfigDict(extra="forbid")

    debounce_secs: float = Field(1.0, gt=0, description="Quiet period before a modified document is pulled")
    poll_interval_secs: float = Field(0.2, gt=0, description="Interval of the foreground watch loop")
    self_write_ttl_secs: float = Field(30.0, gt=0, description="How long a self-write marker stays valid")
