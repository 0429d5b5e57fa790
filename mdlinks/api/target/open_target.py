"""Open a target path, creating it first when it does not exist."""

from pathlib import Path

from ...utils.logger import get_logger
from .EditorBuffer import EditorBuffer
from .OpenAction import OpenAction
from .Opener import Opener
from .OpenResult import OpenResult
from .classify_target import classify_target
from .reveal_directory import reveal_directory
from .TargetKind import TargetKind


def open_target(target_path: str | Path, opener: Opener) -> OpenResult:
    """Reveal, open, or create-then-open ``target_path``.

    - directory (or a stat failure other than "missing"): try the opener's
      reveal providers in order, never open a buffer;
    - missing: create parent directories and an empty file, then open it;
    - file: open it.

    Opening reads the file into an EditorBuffer and hands it to the opener.
    Every failure is caught here and reported once as ``Failed to open: <path>``.
    Nothing is retried and a file created before the failure is left in place.
    """
    logger = get_logger("target")
    target_path = Path(target_path)
    kind: TargetKind | None = None
    created = False

    try:
        kind = classify_target(target_path)
        logger.info("Opening %s (%s)", target_path, kind.value)

        if kind is TargetKind.DIRECTORY:
            revealed_by = reveal_directory(target_path, opener.reveal_providers())
            if revealed_by is None:
                return OpenResult(
                    target=target_path,
                    action=OpenAction.NONE,
                    kind=kind,
                    warnings=[f"No reveal action available for: {target_path}"],
                )
            return OpenResult(target=target_path, action=OpenAction.REVEALED, kind=kind, revealed_by=revealed_by)

        if kind is TargetKind.MISSING:
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.write_text("", encoding="utf-8")
            created = True
            logger.info("Created empty file %s", target_path)

        buffer = EditorBuffer(path=target_path, text=target_path.read_text(encoding="utf-8"))
        opener.show(buffer)
    except Exception as exc:
        reason = f"not UTF-8 text ({exc})" if isinstance(exc, UnicodeDecodeError) else str(exc)
        logger.exception("Failed to open %s: %s", target_path, reason)
        return OpenResult(
            target=target_path,
            action=OpenAction.FAILED,
            kind=kind,
            created=created,
            errors=[f"Failed to open: {target_path}"],
        )

    action = OpenAction.CREATED if created else OpenAction.OPENED
    return OpenResult(target=target_path, action=action, kind=kind, created=created)
