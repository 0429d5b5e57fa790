"""Navigable location returned by a definition lookup."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DefinitionLocation:
    target_path: Path
    line: int = 0
    column: int = 0
