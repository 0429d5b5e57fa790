"""Scan text for path references."""

from pathlib import Path

from ._patterns import BARE_REF_PATTERN, INLINE_CODE_PATTERN, MARKDOWN_LINK_PATTERN
from .RefHit import RefHit
from .RefPattern import RefPattern
from .resolve_token import resolve_token
from .SourceRange import SourceRange

# Heuristic passes in the order they run, with the regex group holding the token
_FALLBACK_PASSES = (
    (BARE_REF_PATTERN, 2, RefPattern.BARE),
    (INLINE_CODE_PATTERN, 1, RefPattern.INLINE_CODE),
)


def scan_refs(text: str, base_dir: str | Path) -> list[RefHit]:
    """Find path references in ``text`` and resolve them against ``base_dir``.

    Markdown links are collected first and always kept. Bare references and
    then inline-code references follow, each dropped if its range intersects
    an already accepted hit. The result is in acceptance order and no two
    hits intersect.

    Pure function: no filesystem access, same inputs give the same output.
    """
    hits: list[RefHit] = []

    for match in MARKDOWN_LINK_PATTERN.finditer(text):
        source_range = SourceRange(match.start(1), match.end(1))
        hits.append(RefHit(source_range, resolve_token(match.group(1), base_dir), RefPattern.MARKDOWN_LINK))

    for pattern, group, kind in _FALLBACK_PASSES:
        for match in pattern.finditer(text):
            candidate = SourceRange(match.start(group), match.end(group))
            if any(hit.source_range.intersects(candidate) for hit in hits):
                continue
            hits.append(RefHit(candidate, resolve_token(match.group(group), base_dir), kind))

    return hits
