"""StageResult dataclass for the 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    The command returns immediately with ``announce`` set; the caller drives
    ``progress_callback`` which yields ``(fraction, message)`` tuples and fills
    in ``result``, ``output`` and ``success`` before it finishes.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
