"""Ref scan API command.

CLI: mdlinks ref scan <path>
"""

from collections.abc import Iterator

from ...utils.logger import get_logger
from ..StageResult import StageResult
from .._output_schemas.ref import RefScanOutput
from ._ensure_document import _ensure_document
from ._hit_to_dict import _hit_to_dict
from .is_markdown_document import is_markdown_document
from .LineIndex import LineIndex
from .scan_refs import scan_refs


def cmd_scan(path: str) -> StageResult:
    """List every path reference in a markdown document."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading document...")
        loaded = _ensure_document(path, result_obj, RefScanOutput, is_markdown=False, links=[])
        if loaded is None:
            return
        config, doc_path, text = loaded

        if not is_markdown_document(doc_path, config.scan.extensions):
            yield (1.0, "Complete")
            result_obj.output = RefScanOutput(
                errors=[],
                warnings=[f"Not a markdown document: {doc_path.name}"],
                path=str(doc_path),
                is_markdown=False,
                links=[],
            ).model_dump(mode="python")
            result_obj.result = f"Skipped {doc_path.name}: not markdown"
            result_obj.success = True
            return

        yield (0.5, "Scanning for references...")
        hits = scan_refs(text, doc_path.parent)
        get_logger("ref").debug("Found %d references in %s", len(hits), doc_path)

        index = LineIndex(text)
        yield (1.0, "Complete")
        result_obj.output = RefScanOutput(
            errors=[],
            warnings=[],
            path=str(doc_path),
            is_markdown=True,
            links=[_hit_to_dict(hit, index) for hit in hits],
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(hits)} references in {doc_path.name}"
        result_obj.success = True

    return StageResult(announce=f"Scanning {path} for references...", progress_callback=do_work)
