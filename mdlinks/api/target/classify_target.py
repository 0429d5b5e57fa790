"""Classify the filesystem entity at a target path."""

import stat
from pathlib import Path

from .TargetKind import TargetKind


def classify_target(target_path: Path) -> TargetKind:
    """Stat ``target_path`` and decide how it should be opened.

    A path that does not exist (or runs through a regular file) is MISSING.
    Any other stat failure is treated as a directory so the user is shown the
    location instead of getting an empty buffer. Non-directories that exist,
    including special files, are FILE.
    """
    try:
        st = target_path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return TargetKind.MISSING
    except OSError:
        return TargetKind.DIRECTORY

    if stat.S_ISDIR(st.st_mode):
        return TargetKind.DIRECTORY
    return TargetKind.FILE
