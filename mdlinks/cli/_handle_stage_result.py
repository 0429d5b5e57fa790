"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)

DEFAULT_DISPLAY_FORMAT = "yaml"


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Get the display format set by the root callback.

    Sub-apps invoked on their own (e.g. in tests) have no root callback and
    get the default format.

    Raises:
        ValueError: If an invalid display format value is encountered.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent
    return DEFAULT_DISPLAY_FORMAT


def _handle_stage_result(func: F, ctx: typer.Context | None = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, YAML or JSON)

    The wrapped call exits with 0 on success and 1 otherwise.
    """
    display_format = _extract_display_format(ctx)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format)

    return wrapper  # type: ignore[return-value]
