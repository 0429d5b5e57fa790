"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    section: str = Field(..., description="Section name, empty string when listing all sections")
    content: dict[str, Any] = Field(
        ..., description="If section is empty: {'sections': [...]}; otherwise the section config dict"
    )
    config_path: str = Field(..., description="Path to the configuration file")


class ConfigInitOutput(BaseOutputSchema):
    """Output schema for config init command."""

    config_path: str = Field(..., description="Path to the configuration file")
    created: bool = Field(..., description="Whether a config file was written")
    content: dict[str, Any] = Field(..., description="Configuration that is now on disk, empty on failure")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")
    git_sha: str = Field(..., description="Git commit SHA (short), empty string if not available")
    full_version: str = Field(..., description="Full version string (version + git_sha if available)")


schema_registry.register_output_schema("config", "show", ConfigShowOutput)
schema_registry.register_output_schema("config", "init", ConfigInitOutput)
schema_registry.register_output_schema("config", "version", ConfigVersionOutput)
