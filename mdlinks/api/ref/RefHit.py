"""Reference hit dataclass."""

from dataclasses import dataclass
from pathlib import Path

from .RefPattern import RefPattern
from .SourceRange import SourceRange


@dataclass(frozen=True)
class RefHit:
    """A path reference found in a document and resolved to an absolute path."""

    source_range: SourceRange
    target_path: Path
    pattern: RefPattern
