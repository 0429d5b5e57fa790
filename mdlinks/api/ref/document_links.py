"""Build clickable document links for every reference in a document."""

from functools import partial
from pathlib import Path

from ..target.Opener import Opener
from ..target.open_target import open_target
from .DocumentLink import DocumentLink
from .scan_refs import scan_refs


def document_links(text: str, base_dir: str | Path, opener: Opener | None = None) -> list[DocumentLink]:
    """Return one DocumentLink per scanned hit, in scanner order.

    With an opener, each link's handler opens its own target directly.
    """
    links = []
    for hit in scan_refs(text, base_dir):
        handler = partial(open_target, hit.target_path, opener) if opener is not None else None
        links.append(DocumentLink(source_range=hit.source_range, target_path=hit.target_path, handler=handler))
    return links
