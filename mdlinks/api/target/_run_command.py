"""Run an external host command for an opener backend."""

import shutil
import subprocess

from ...utils.logger import get_logger


def _run_command(argv: list[str], capture: bool = True) -> None:
    """Run ``argv`` and raise if the command is missing or exits non-zero.

    Args:
        argv: Command and arguments.
        capture: Capture output instead of inheriting the terminal. Editors
            that take over the terminal need ``capture=False``.

    Raises:
        FileNotFoundError: If the executable is not on PATH.
        subprocess.CalledProcessError: If the command fails.
    """
    if not argv:
        raise ValueError("Empty command")
    if shutil.which(argv[0]) is None:
        raise FileNotFoundError(f"Command not found: {argv[0]}")

    get_logger("target").debug("Running %s", argv)
    subprocess.run(argv, check=True, capture_output=capture, text=True)
