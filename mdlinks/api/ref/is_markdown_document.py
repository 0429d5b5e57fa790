"""Decide whether a document is handled as markdown."""

from collections.abc import Iterable
from pathlib import Path

from ...constants import DEFAULT_MARKDOWN_EXTENSIONS


def is_markdown_document(path: str | Path, extensions: Iterable[str] = DEFAULT_MARKDOWN_EXTENSIONS) -> bool:
    return Path(path).suffix.lower() in {ext.lower() for ext in extensions}
