"""Position-to-hit lookup."""

from collections.abc import Iterable

from .RefHit import RefHit


def find_hit_at(hits: Iterable[RefHit], offset: int) -> RefHit | None:
    """Return the first hit, in scanner order, whose range contains ``offset``."""
    for hit in hits:
        if hit.source_range.contains(offset):
            return hit
    return None
