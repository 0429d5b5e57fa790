"""Default configuration for the current platform."""

import platform
from typing import Any

from ...constants import DEFAULT_MARKDOWN_EXTENSIONS

_DEFAULT_OPENERS: dict[str, dict[str, Any]] = {
    "darwin": {"type": "darwin", "data": {"editor": ["open", "-t"], "file_browser": []}},
    "linux": {"type": "linux", "data": {"editor": ["xdg-open"], "file_browser": []}},
}


def default_config_dict() -> dict[str, Any]:
    """Build a complete config dict for the running platform.

    Raises:
        RuntimeError: If there is no opener backend for this platform.
    """
    system = platform.system().lower()
    opener = _DEFAULT_OPENERS.get(system)
    if opener is None:
        raise RuntimeError(f"Unsupported platform for opener: {system!r} (supported: {list(_DEFAULT_OPENERS)})")

    return {
        "scan": {"extensions": list(DEFAULT_MARKDOWN_EXTENSIONS)},
        "opener": {"type": opener["type"], "data": dict(opener["data"])},
        "log": {"level": "INFO", "max_bytes": 5 * 1024 * 1024, "backup_count": 3},
    }
