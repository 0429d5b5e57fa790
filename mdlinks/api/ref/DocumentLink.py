"""Clickable region produced for a reference hit."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ...constants import LINK_TOOLTIP
from ..target.OpenResult import OpenResult
from .SourceRange import SourceRange


@dataclass(frozen=True)
class DocumentLink:
    """A decorated link; activating it opens the target it was built for."""

    source_range: SourceRange
    target_path: Path
    tooltip: str = LINK_TOOLTIP
    handler: Callable[[], OpenResult] | None = None

    def activate(self) -> OpenResult:
        if self.handler is None:
            raise RuntimeError(f"No opener bound to link for {self.target_path}")
        return self.handler()
