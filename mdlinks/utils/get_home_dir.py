"""Get mdlinks home directory path or path under it."""

import os
from pathlib import Path

from ..constants import MDLINKS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get mdlinks home directory path or path under it.

    Checks the MDLINKS_HOME environment variable first, defaults to ~/.mdlinks.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.mdlinks")
        >>> get_home_dir("config.json")
        Path("/Users/user/.mdlinks/config.json")
    """
    home_env = os.environ.get("MDLINKS_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / MDLINKS_HOME_EXT

    return home / Path(*parts) if parts else home
