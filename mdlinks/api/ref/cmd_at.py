"""Ref at API command.

CLI: mdlinks ref at <path> <line> <column>
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.ref import RefAtOutput
from ._ensure_document import _ensure_document
from ._hit_to_dict import _hit_to_dict
from .find_hit_at import find_hit_at
from .is_markdown_document import is_markdown_document
from .LineIndex import LineIndex
from .scan_refs import scan_refs


def cmd_at(path: str, line: int, column: int) -> StageResult:
    """Find the reference under a 1-based cursor position.

    No reference under the cursor is a normal, successful result.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading document...")
        loaded = _ensure_document(path, result_obj, RefAtOutput, line=line, column=column, found=False, link={})
        if loaded is None:
            return
        config, doc_path, text = loaded

        warnings: list[str] = []
        link: dict = {}
        if is_markdown_document(doc_path, config.scan.extensions):
            yield (0.5, "Scanning for references...")
            index = LineIndex(text)
            hit = find_hit_at(scan_refs(text, doc_path.parent), index.offset_at(line - 1, column - 1))
            if hit is not None:
                link = _hit_to_dict(hit, index)
        else:
            warnings.append(f"Not a markdown document: {doc_path.name}")

        yield (1.0, "Complete")
        result_obj.output = RefAtOutput(
            errors=[],
            warnings=warnings,
            path=str(doc_path),
            line=line,
            column=column,
            found=bool(link),
            link=link,
        ).model_dump(mode="python")
        result_obj.result = (
            f"Reference at {line}:{column}: {link['target']}" if link else f"No reference at {line}:{column}"
        )
        result_obj.success = True

    return StageResult(announce=f"Looking up reference at {path}:{line}:{column}...", progress_callback=do_work)
