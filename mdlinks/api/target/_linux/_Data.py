"""Linux (freedesktop) opener configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    """Commands used to show files and reveal directories on Linux."""

    model_config = ConfigDict(extra="forbid")

    editor: list[str] = Field(..., description="Command that opens a file, the path is appended (e.g. ['xdg-open'])")
    file_browser: list[str] = Field(
        ..., description="Command that reveals a directory, path appended; empty list if unavailable"
    )

    @field_validator("editor")
    @classmethod
    def validate_editor(cls, v: list[str]) -> list[str]:
        if not v or not v[0]:
            raise ValueError("opener.data.editor must name a command when opener.type is 'linux'")
        return v
