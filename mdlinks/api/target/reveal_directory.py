"""Try reveal providers in order until one succeeds."""

from pathlib import Path

from ...utils.logger import get_logger
from ._AbstractImpl import RevealProvider


def reveal_directory(target_path: Path, providers: list[RevealProvider]) -> str | None:
    """Reveal ``target_path`` with the first provider that does not raise.

    Returns:
        Name of the provider that succeeded, or None when all of them failed.
    """
    logger = get_logger("target")
    for name, provider in providers:
        try:
            provider(target_path)
        except Exception as exc:
            logger.warning("Reveal via %s failed for %s: %s", name, target_path, exc)
            continue
        logger.info("Revealed %s via %s", target_path, name)
        return name
    return None
