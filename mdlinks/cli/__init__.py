"""CLI - main entry point."""

import sys

import typer

from ..api.config.MdlinksConfig import MdlinksConfig
from ..utils.logger import configure_logging


def _configure_logging_from_config() -> None:
    """Apply the configured log settings, falling back to defaults without a config."""
    try:
        log_cfg = MdlinksConfig.load().log
    except ValueError:
        configure_logging()
        return
    configure_logging(level=log_cfg.level, max_bytes=log_cfg.max_bytes, backup_count=log_cfg.backup_count)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    _configure_logging_from_config()

    if "--version" in argv or "-v" in argv:
        from ..api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"mdlinks {result.output.get('full_version', 'unknown')}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        # Standalone mode: usage errors print their own message and exit with 2
        app(argv, prog_name="mdlinks")
        return 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
