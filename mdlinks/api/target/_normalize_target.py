"""Turn a user-supplied target argument into an absolute path."""

import os
from pathlib import Path


def _normalize_target(path: str) -> Path:
    """Expand ``~`` and make ``path`` absolute without resolving symlinks."""
    return Path(os.path.abspath(Path(path).expanduser()))
