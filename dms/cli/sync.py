"""Sync command registration."""

import typer

from dms.api.sync.cmd_sync import cmd_sync
from dms.cli._handle_stage_result import _handle_stage_result


def register_sync(app: typer.Typer) -> None:
    @app.command(name="sync")
    def sync_cmd() -> None:
        """Regenerate every proxy document from the link store."""
        _handle_stage_result(cmd_sync)()
