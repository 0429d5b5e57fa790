"""Internal helper for ref commands: load a document from disk."""

import os
from pathlib import Path


def _read_document(path: str) -> tuple[Path, str]:
    """Return the absolute document path and its text.

    Raises:
        FileNotFoundError: If the document does not exist.
        ValueError: If the path is not a regular file or cannot be read as UTF-8 text.
    """
    doc_path = Path(os.path.abspath(Path(path).expanduser()))
    if not doc_path.is_file():
        if doc_path.exists():
            raise ValueError(f"Not a file: {doc_path}")
        raise FileNotFoundError(f"Document does not exist: {doc_path}")
    try:
        text = doc_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ValueError(f"Cannot read document: {exc}") from exc
    return doc_path, text
