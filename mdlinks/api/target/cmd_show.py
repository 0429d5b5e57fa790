"""Target show API command.

CLI: mdlinks target show <path>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.target import TargetShowOutput
from ._normalize_target import _normalize_target
from .classify_target import classify_target


def cmd_show(path: str) -> StageResult:
    """Report whether a target is a directory, a file, or missing. Never creates anything."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        target_path = _normalize_target(path)

        yield (0.5, "Checking target...")
        kind = classify_target(target_path)

        yield (1.0, "Complete")
        result_obj.output = TargetShowOutput(
            errors=[],
            warnings=[],
            target=str(target_path),
            kind=kind.value,
        ).model_dump(mode="python")
        result_obj.result = f"{target_path} is {kind.value}"
        result_obj.success = True

    return StageResult(announce=f"Checking {path}...", progress_callback=do_work)
