"""Source range of a reference inside scanned text."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceRange:
    """Character offsets ``[start, end)`` of a reference.

    Containment and intersection use closed-interval checks, matching how
    editor ranges behave: a cursor sitting right after the last character is
    still "in" the reference, and ranges that merely touch intersect.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid source range: ({self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def contains(self, offset: int) -> bool:
        return self.start <= offset <= self.end

    def intersects(self, other: "SourceRange") -> bool:
        return max(self.start, other.start) <= min(self.end, other.end)
