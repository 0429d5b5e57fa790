"""Resolve a path-like token against a base directory."""

import os
from pathlib import Path


def resolve_token(token: str, base_dir: str | Path) -> Path:
    """Resolve ``token`` to an absolute path without touching the filesystem.

    A single leading ``@`` is stripped. Absolute tokens ignore ``base_dir``;
    relative ones are joined to it. ``.`` and ``..`` segments are collapsed
    lexically, so symlinks are not followed.
    """
    if token.startswith("@"):
        token = token[1:]

    resolved = os.path.abspath(os.path.join(os.fspath(base_dir), token))
    # POSIX keeps a leading "//" as implementation-defined; treat it as root
    if os.name == "posix" and resolved.startswith("//"):
        resolved = "/" + resolved.lstrip("/")
    return Path(resolved)
