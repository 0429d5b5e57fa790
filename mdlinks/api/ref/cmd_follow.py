"""Ref follow API command.

CLI: mdlinks ref follow <path> <line> <column>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.ref import RefFollowOutput
from ..target.Opener import Opener
from ._ensure_document import _ensure_document
from .dispatch_open import dispatch_open
from .is_markdown_document import is_markdown_document
from .LineIndex import LineIndex

_NOT_FOLLOWED = {"found": False, "target": "", "kind": "", "action": "none", "created": False, "revealed_by": ""}


def cmd_follow(path: str, line: int, column: int) -> StageResult:
    """Open the target of the reference under a 1-based cursor position."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading document...")
        loaded = _ensure_document(path, result_obj, RefFollowOutput, line=line, column=column, **_NOT_FOLLOWED)
        if loaded is None:
            return
        config, doc_path, text = loaded

        if not is_markdown_document(doc_path, config.scan.extensions):
            yield (1.0, "Complete")
            result_obj.output = RefFollowOutput(
                errors=[],
                warnings=[f"Not a markdown document: {doc_path.name}"],
                path=str(doc_path),
                line=line,
                column=column,
                **_NOT_FOLLOWED,
            ).model_dump(mode="python")
            result_obj.result = f"Skipped {doc_path.name}: not markdown"
            result_obj.success = True
            return

        yield (0.4, "Finding reference under cursor...")
        offset = LineIndex(text).offset_at(line - 1, column - 1)
        with Opener(config.opener) as opener:
            open_result = dispatch_open(opener, text=text, base_dir=doc_path.parent, offset=offset)

        yield (1.0, "Complete")
        if open_result is None:
            result_obj.output = RefFollowOutput(
                errors=[], warnings=[], path=str(doc_path), line=line, column=column, **_NOT_FOLLOWED
            ).model_dump(mode="python")
            result_obj.result = f"No reference at {line}:{column}"
            result_obj.success = True
            return

        result_obj.output = RefFollowOutput(
            path=str(doc_path),
            line=line,
            column=column,
            found=True,
            **open_result.to_dict(),
        ).model_dump(mode="python")
        result_obj.result = (
            open_result.errors[0] if not open_result.success else f"{open_result.action.value}: {open_result.target}"
        )
        result_obj.success = open_result.success

    return StageResult(announce=f"Following reference at {path}:{line}:{column}...", progress_callback=do_work)
