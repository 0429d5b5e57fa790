"""Serialize a reference hit for command output."""

from typing import Any

from .LineIndex import LineIndex
from .RefHit import RefHit


def _hit_to_dict(hit: RefHit, index: LineIndex) -> dict[str, Any]:
    """Offsets plus 1-based line/column positions, target and pattern."""
    start_line, start_column = index.position_at(hit.source_range.start)
    end_line, end_column = index.position_at(hit.source_range.end)
    return {
        "start": hit.source_range.start,
        "end": hit.source_range.end,
        "line_number": start_line + 1,
        "column_number": start_column + 1,
        "end_line_number": end_line + 1,
        "end_column_number": end_column + 1,
        "target": str(hit.target_path),
        "pattern": hit.pattern.value,
    }
