"""Offset <-> (line, column) conversion for scanned text."""

import re
from bisect import bisect_right

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class LineIndex:
    """Map character offsets to 0-based ``(line, column)`` positions and back.

    ``\\r\\n``, ``\\r`` and ``\\n`` all end a line. Positions outside the text
    are clamped to it.
    """

    def __init__(self, text: str):
        self._length = len(text)
        self._line_starts = [0]
        self._line_ends = []
        for match in _LINE_BREAK.finditer(text):
            self._line_ends.append(match.start())
            self._line_starts.append(match.end())
        self._line_ends.append(self._length)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def position_at(self, offset: int) -> tuple[int, int]:
        offset = min(max(offset, 0), self._length)
        line = bisect_right(self._line_starts, offset) - 1
        return line, offset - self._line_starts[line]

    def offset_at(self, line: int, column: int) -> int:
        if line < 0:
            return 0
        if line >= self.line_count:
            return self._length
        start = self._line_starts[line]
        return min(start + max(column, 0), self._line_ends[line])
