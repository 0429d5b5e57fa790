"""File contents loaded for editing."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class EditorBuffer:
    path: Path
    text: str
