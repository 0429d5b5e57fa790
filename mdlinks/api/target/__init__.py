"""Target API domain - classify and open resolved paths."""

from .._output_schemas.target import TargetOpenOutput, TargetShowOutput
from .classify_target import classify_target
from .EditorBuffer import EditorBuffer
from .OpenAction import OpenAction
from .Opener import Opener
from .OpenerConfig import OpenerConfig
from .OpenResult import OpenResult
from .open_target import open_target
from .TargetKind import TargetKind

__all__ = [
    "EditorBuffer",
    "OpenAction",
    "OpenResult",
    "Opener",
    "OpenerConfig",
    "TargetKind",
    "TargetOpenOutput",
    "TargetShowOutput",
    "classify_target",
    "open_target",
]
