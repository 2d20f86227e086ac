"""Create the main Typer CLI app."""

import typer

from dms.cli.config import config
from dms.cli.link import link
from dms.cli.sync import register_sync
from dms.cli.watch import register_watch


def _configure_logging() -> None:
    from dms.api.config.DmsConfig import DmsConfig
    from dms.utils.configure_logging import configure_logging

    try:
        level = DmsConfig.load().log.level
    except ValueError:
        level = "INFO"
    configure_logging(level=level)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="DMS: external links mirrored as editable proxy documents",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(link(), name="link")
    app.add_typer(config(), name="config")
    register_sync(app)
    register_watch(app)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        _configure_logging()

    return app
