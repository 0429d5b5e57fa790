"""Internal helper for ref commands to reduce boilerplate."""

from pathlib import Path
from typing import Any

from ..config.MdlinksConfig import MdlinksConfig
from ..StageResult import StageResult
from ._read_document import _read_document


def _ensure_document(
    path: str, result_obj: StageResult, output_cls: Any, **default_fields: Any
) -> tuple[MdlinksConfig, Path, str] | None:
    """Load config and the document, or populate result_obj with failure.

    Args:
        path: Document path as given by the caller.
        result_obj: The StageResult object to populate on failure.
        output_cls: The Pydantic model class for the output.
        **default_fields: Values for the remaining required fields in output_cls.

    Returns:
        (config, document path, text) if both loaded, None otherwise (StageResult already populated).
    """
    try:
        config = MdlinksConfig.load()
        doc_path, text = _read_document(path)
    except (FileNotFoundError, ValueError) as e:
        result_obj.output = output_cls(path=path, errors=[str(e)], warnings=[], **default_fields).model_dump(
            mode="python"
        )
        result_obj.result = f"Error: {e}"
        result_obj.success = False
        return None

    return config, doc_path, text
