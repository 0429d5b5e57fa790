"""Target open API command.

CLI: mdlinks target open <path>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.target import TargetOpenOutput
from ..config.MdlinksConfig import MdlinksConfig
from ._normalize_target import _normalize_target
from .OpenAction import OpenAction
from .Opener import Opener
from .OpenResult import OpenResult
from .open_target import open_target


def _describe(result: OpenResult) -> str:
    if not result.success:
        return result.errors[0]
    if result.action is OpenAction.REVEALED:
        return f"Revealed {result.target} via {result.revealed_by}"
    if result.action is OpenAction.CREATED:
        return f"Created and opened {result.target}"
    if result.action is OpenAction.OPENED:
        return f"Opened {result.target}"
    return f"Could not reveal {result.target}"


def cmd_open(path: str) -> StageResult:
    """Open an explicit target: reveal a directory, open a file, or create then open it."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        target_path = _normalize_target(path)

        yield (0.2, "Loading configuration...")
        try:
            config = MdlinksConfig.load()
        except ValueError as e:
            result_obj.output = TargetOpenOutput(
                errors=[str(e)],
                warnings=[],
                target=str(target_path),
                kind="",
                action="failed",
                created=False,
                revealed_by="",
            ).model_dump(mode="python")
            result_obj.result = f"Error loading configuration: {e}"
            result_obj.success = False
            return

        yield (0.5, f"Opening {target_path}...")
        with Opener(config.opener) as opener:
            open_result = open_target(target_path, opener)

        yield (1.0, "Complete")
        result_obj.output = TargetOpenOutput(**open_result.to_dict()).model_dump(mode="python")
        result_obj.result = _describe(open_result)
        result_obj.success = open_result.success

    return StageResult(announce=f"Opening {path}...", progress_callback=do_work)
