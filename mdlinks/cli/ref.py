"""Ref Typer app factory."""

import typer

from ..api.ref.cmd_at import cmd_at
from ..api.ref.cmd_definition import cmd_definition
from ..api.ref.cmd_follow import cmd_follow
from ..api.ref.cmd_scan import cmd_scan
from ._handle_stage_result import _handle_stage_result


def ref() -> typer.Typer:
    """Create and configure the ref Typer app."""
    app = typer.Typer(
        name="ref",
        help="Find and follow path references in markdown documents",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="scan")
    def scan_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Markdown document to scan"),
    ) -> None:
        """List every path reference in a document."""
        _handle_stage_result(cmd_scan, ctx)(path=path)

    @app.command(name="at")
    def at_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Markdown document to scan"),
        line: int = typer.Argument(..., min=1, help="1-based cursor line"),
        column: int = typer.Argument(..., min=1, help="1-based cursor column"),
    ) -> None:
        """Show the reference under a cursor position."""
        _handle_stage_result(cmd_at, ctx)(path=path, line=line, column=column)

    @app.command(name="definition")
    def definition_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Markdown document to scan"),
        line: int = typer.Argument(..., min=1, help="1-based cursor line"),
        column: int = typer.Argument(..., min=1, help="1-based cursor column"),
    ) -> None:
        """Resolve the reference under a cursor to an existing file."""
        _handle_stage_result(cmd_definition, ctx)(path=path, line=line, column=column)

    @app.command(name="follow")
    def follow_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Markdown document to scan"),
        line: int = typer.Argument(..., min=1, help="1-based cursor line"),
        column: int = typer.Argument(..., min=1, help="1-based cursor column"),
    ) -> None:
        """Open (or create) the target of the reference under a cursor."""
        _handle_stage_result(cmd_follow, ctx)(path=path, line=line, column=column)

    return app
