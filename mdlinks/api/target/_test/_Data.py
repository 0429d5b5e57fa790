"""Test backend opener configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    """Opener config that records actions instead of touching the desktop."""

    model_config = ConfigDict(extra="forbid")

    fail_providers: list[Literal["file_browser", "os"]] = Field(
        ..., description="Reveal providers that should raise when called"
    )
    fail_show: bool = Field(..., description="Whether showing a buffer should raise")
    record_file: str = Field(..., description="JSON-lines file that receives recorded actions, empty to disable")
