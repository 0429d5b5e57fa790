"""Result of opening a target."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .OpenAction import OpenAction
from .TargetKind import TargetKind


@dataclass
class OpenResult:
    """Outcome of a single open_target call.

    ``errors`` holds at most one user-facing message naming the target; a
    non-empty list means the open failed.
    """

    target: Path
    action: OpenAction
    kind: TargetKind | None = None
    created: bool = False
    revealed_by: str = ""
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": str(self.target),
            "kind": self.kind.value if self.kind else "",
            "action": self.action.value,
            "created": self.created,
            "revealed_by": self.revealed_by,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
