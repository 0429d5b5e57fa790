"""Output schemas for ref commands.

A serialized link is a dict with:
- start / end: character offsets of the reference in the document
- line_number / column_number: 1-based start position
- end_line_number / end_column_number: 1-based end position
- target: absolute target path
- pattern: scanning pass that produced the hit
"""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class RefScanOutput(BaseOutputSchema):
    """Output schema for ref scan command."""

    path: str = Field(..., description="Absolute path of the scanned document")
    is_markdown: bool = Field(..., description="Whether the document is handled as markdown")
    links: list[dict[str, Any]] = Field(..., description="Document links in scanner order")


class RefAtOutput(BaseOutputSchema):
    """Output schema for ref at command."""

    path: str = Field(..., description="Absolute path of the scanned document")
    line: int = Field(..., description="1-based cursor line")
    column: int = Field(..., description="1-based cursor column")
    found: bool = Field(..., description="Whether a reference contains the cursor")
    link: dict[str, Any] = Field(..., description="Serialized link under the cursor, empty dict if none")


class RefDefinitionOutput(BaseOutputSchema):
    """Output schema for ref definition command."""

    path: str = Field(..., description="Absolute path of the scanned document")
    line: int = Field(..., description="1-based cursor line")
    column: int = Field(..., description="1-based cursor column")
    found: bool = Field(..., description="Whether a definition location was found")
    location: dict[str, Any] = Field(..., description="{'target', 'line_number', 'column_number'} or empty dict")


class RefFollowOutput(BaseOutputSchema):
    """Output schema for ref follow command."""

    path: str = Field(..., description="Absolute path of the scanned document")
    line: int = Field(..., description="1-based cursor line")
    column: int = Field(..., description="1-based cursor column")
    found: bool = Field(..., description="Whether a reference contains the cursor")
    target: str = Field(..., description="Resolved target path, empty string if no reference")
    kind: str = Field(..., description="directory, file or missing; empty string if unknown")
    action: str = Field(..., description="revealed, opened, created, none or failed")
    created: bool = Field(..., description="Whether an empty file was created")
    revealed_by: str = Field(..., description="Reveal provider that succeeded, empty string if none")


schema_registry.register_output_schema("ref", "scan", RefScanOutput)
schema_registry.register_output_schema("ref", "at", RefAtOutput)
schema_registry.register_output_schema("ref", "definition", RefDefinitionOutput)
schema_registry.register_output_schema("ref", "follow", RefFollowOutput)
