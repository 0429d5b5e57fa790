import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE_NAME
from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(
    home: Path | None = None,
    level: str = "INFO",
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure unified mdlinks logging.

    Args:
        home: Path to mdlinks home directory. If None, derived from environment.
        level: Logging level name for the ``mdlinks`` logger.
        max_bytes: Size at which the logfile rotates.
        backup_count: Number of rotated logfiles to keep.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / LOG_FILE_NAME

    root_logger = logging.getLogger("mdlinks")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"mdlinks.{name}")
