"""Definition lookup for the reference under a cursor."""

from pathlib import Path

from .DefinitionLocation import DefinitionLocation
from .find_hit_at import find_hit_at
from .scan_refs import scan_refs


def find_definition(text: str, base_dir: str | Path, offset: int) -> DefinitionLocation | None:
    """Return the start of the referenced file if it exists as a regular file.

    Missing targets, directories and stat errors all give None. Nothing is
    ever created here; creation is reserved for explicit opens.
    """
    hit = find_hit_at(scan_refs(text, base_dir), offset)
    if hit is None:
        return None

    try:
        is_file = hit.target_path.is_file()
    except OSError:
        return None

    return DefinitionLocation(target_path=hit.target_path) if is_file else None
