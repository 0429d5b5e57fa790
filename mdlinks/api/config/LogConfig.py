"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogConfig(BaseModel):
    """Logfile settings for the ``mdlinks`` logger."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(..., description="Logging level")
    max_bytes: int = Field(..., gt=0, description="Size in bytes at which the logfile rotates")
    backup_count: int = Field(..., ge=0, description="Number of rotated logfiles to keep")
