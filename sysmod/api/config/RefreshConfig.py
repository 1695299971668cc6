"""Status refresh cadence configuration."""

from pydantic import BaseModel, ConfigDict, Field


class RefreshConfig(BaseModel):
    """Refresh cadence of the status watcher."""

    model_config = ConfigDict(extra="forbid")

    every_ticks: int = Field(20, gt=0, description="Refresh all module statuses once every N frames")
    frame_secs: float = Field(1 / 60, gt=0, description="Seconds between frames when watching")
