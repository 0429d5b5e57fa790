"""Open command dispatch: explicit target or reference under a cursor."""

from pathlib import Path

from ..target.Opener import Opener
from ..target.OpenResult import OpenResult
from ..target.open_target import open_target
from .find_hit_at import find_hit_at
from .scan_refs import scan_refs


def dispatch_open(
    opener: Opener,
    target: str | Path | None = None,
    text: str | None = None,
    base_dir: str | Path | None = None,
    offset: int | None = None,
) -> OpenResult | None:
    """Open ``target`` directly, or the reference containing ``offset`` in ``text``.

    Returns:
        The open result, or None when no reference contains the cursor.

    Raises:
        ValueError: If neither a target nor a full cursor context is given.
    """
    if target is not None:
        return open_target(target, opener)

    if text is None or base_dir is None or offset is None:
        raise ValueError("dispatch_open needs a target or text, base_dir and offset")

    hit = find_hit_at(scan_refs(text, base_dir), offset)
    if hit is None:
        return None
    return open_target(hit.target_path, opener)
