"""Output schemas for target commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class TargetShowOutput(BaseOutputSchema):
    """Output schema for target show command."""

    target: str = Field(..., description="Absolute target path")
    kind: str = Field(..., description="directory, file or missing")


class TargetOpenOutput(BaseOutputSchema):
    """Output schema for target open command."""

    target: str = Field(..., description="Absolute target path")
    kind: str = Field(..., description="directory, file or missing; empty string if stat never ran")
    action: str = Field(..., description="revealed, opened, created, none or failed")
    created: bool = Field(..., description="Whether an empty file was created")
    revealed_by: str = Field(..., description="Reveal provider that succeeded, empty string if none")


schema_registry.register_output_schema("target", "show", TargetShowOutput)
schema_registry.register_output_schema("target", "open", TargetOpenOutput)
