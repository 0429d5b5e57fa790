"""Scan configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScanConfig(BaseModel):
    """Which documents the scanner adapters act on."""

    model_config = ConfigDict(extra="forbid")

    extensions: list[str] = Field(..., min_length=1, description="Markdown file suffixes, e.g. ['.md']")

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        normalized = []
        for ext in v:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"scan.extensions entries must look like '.md', got: {ext!r}")
            normalized.append(ext.lower())
        return normalized
