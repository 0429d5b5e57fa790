"""Ref definition API command.

CLI: mdlinks ref definition <path> <line> <column>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.ref import RefDefinitionOutput
from ._ensure_document import _ensure_document
from .find_definition import find_definition
from .is_markdown_document import is_markdown_document
from .LineIndex import LineIndex


def cmd_definition(path: str, line: int, column: int) -> StageResult:
    """Resolve the reference under the cursor to an existing file location."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading document...")
        loaded = _ensure_document(
            path, result_obj, RefDefinitionOutput, line=line, column=column, found=False, location={}
        )
        if loaded is None:
            return
        config, doc_path, text = loaded

        location = None
        warnings: list[str] = []
        if is_markdown_document(doc_path, config.scan.extensions):
            yield (0.5, "Looking up definition...")
            offset = LineIndex(text).offset_at(line - 1, column - 1)
            location = find_definition(text, doc_path.parent, offset)
        else:
            warnings.append(f"Not a markdown document: {doc_path.name}")

        location_dict = (
            {
                "target": str(location.target_path),
                "line_number": location.line + 1,
                "column_number": location.column + 1,
            }
            if location
            else {}
        )

        yield (1.0, "Complete")
        result_obj.output = RefDefinitionOutput(
            errors=[],
            warnings=warnings,
            path=str(doc_path),
            line=line,
            column=column,
            found=location is not None,
            location=location_dict,
        ).model_dump(mode="python")
        result_obj.result = (
            f"Definition: {location.target_path}" if location else f"No definition at {line}:{column}"
        )
        result_obj.success = True

    return StageResult(announce=f"Finding definition at {path}:{line}:{column}...", progress_callback=do_work)
