"""Watch command registration."""

import typer

from dms.api.watch.cmd_run import cmd_run
from dms.cli._handle_stage_result import _handle_stage_result


def register_watch(app: typer.Typer) -> None:
    @app.command(name="watch")
    def watch_cmd(
        duration: float | None = typer.Option(None, "--duration", help="Stop after this many seconds"),
    ) -> None:
        """Pull proxy document edits into the link store until interrupted."""
        _handle_stage_result(cmd_run)(duration)
