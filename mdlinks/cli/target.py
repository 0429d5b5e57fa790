"""Target Typer app factory."""

import typer

from ..api.target.cmd_open import cmd_open
from ..api.target.cmd_show import cmd_show
from ._handle_stage_result import _handle_stage_result


def target() -> typer.Typer:
    """Create and configure the target Typer app."""
    app = typer.Typer(
        name="target",
        help="Inspect and open resolved target paths",
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

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Target path"),
    ) -> None:
        """Report whether a target is a directory, a file, or missing."""
        _handle_stage_result(cmd_show, ctx)(path=path)

    @app.command(name="open")
    def open_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Target path"),
    ) -> None:
        """Reveal a directory, open a file, or create and open a missing file."""
        _handle_stage_result(cmd_open, ctx)(path=path)

    return app
