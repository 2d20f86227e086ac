"""Config Typer app factory."""

import typer

from dms.api.config.cmd_init import cmd_init
from dms.api.config.cmd_show import cmd_show
from dms.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument("", help="Configuration section name (empty lists sections)"),
    ) -> None:
        """Show configuration."""
        _handle_stage_result(cmd_show)(section)

    @app.command(name="init")
    def init_cmd(
        base_dir: str = typer.Argument(..., help="Root directory of the document store to mirror into"),
        force: bool = typer.Option(False, "--force", help="Overwrite an existing configuration"),
    ) -> None:
        """Write a starter configuration."""
        _handle_stage_result(cmd_init)(base_dir, force)

    return app
