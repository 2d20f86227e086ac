"""Link Typer app factory."""

import typer

from dms.api.link.cmd_add import cmd_add
from dms.api.link.cmd_categories import cmd_categories
from dms.api.link.cmd_delete import cmd_delete
from dms.api.link.cmd_edit import cmd_edit
from dms.api.link.cmd_list import cmd_list
from dms.api.link.cmd_open import cmd_open
from dms.api.link.cmd_search import cmd_search
from dms.api.link.cmd_show import cmd_show
from dms.api.link.cmd_tag_add import cmd_tag_add
from dms.api.link.cmd_tags import cmd_tags
from dms.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Manage external links and their proxy documents",
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

    @app.command(name="add")
    def add_cmd(
        path: str = typer.Argument(..., help="URL or local path of the external resource"),
        title: str = typer.Option(..., "--title", "-t", help="Title (also names the proxy document)"),
        categories: str = typer.Option("", "--categories", "-c", help="Comma-separated categories"),
        audience: str = typer.Option("", "--audience", "-a", help="Comma-separated audiences"),
        tags: str = typer.Option("", "--tags", help="Comma-separated tags"),
        notes: str = typer.Option("", "--notes", help="Free-form notes"),
        summary: str = typer.Option("", "--summary", help="Short summary"),
        file_type: str = typer.Option("", "--file-type", help="File type label"),
        size: int = typer.Option(0, "--size", help="Size in bytes"),
    ) -> None:
        """Add a link."""
        _handle_stage_result(cmd_add)(path, title, categories, audience, tags, notes, summary, file_type, size)

    @app.command(name="edit")
    def edit_cmd(
        path: str = typer.Argument(..., help="External path of the link to edit"),
        title: str | None = typer.Option(None, "--title", "-t", help="New title"),
        new_path: str | None = typer.Option(None, "--new-path", help="New external path"),
        categories: str | None = typer.Option(None, "--categories", "-c", help="Comma-separated categories"),
        audience: str | None = typer.Option(None, "--audience", "-a", help="Comma-separated audiences"),
        tags: str | None = typer.Option(None, "--tags", help="Comma-separated tags"),
        notes: str | None = typer.Option(None, "--notes", help="Free-form notes"),
        summary: str | None = typer.Option(None, "--summary", help="Short summary"),
        file_type: str | None = typer.Option(None, "--file-type", help="File type label"),
    ) -> None:
        """Edit a link; omitted options keep their current value."""
        _handle_stage_result(cmd_edit)(path, title, new_path, categories, audience, tags, notes, summary, file_type)

    @app.command(name="delete")
    def delete_cmd(path: str = typer.Argument(..., help="External path of the link")) -> None:
        """Delete a link and its proxy document."""
        _handle_stage_result(cmd_delete)(path)

    @app.command(name="list")
    def list_cmd() -> None:
        """List all links."""
        _handle_stage_result(cmd_list)()

    @app.command(name="show")
    def show_cmd(path: str = typer.Argument(..., help="External path of the link")) -> None:
        """Show one link."""
        _handle_stage_result(cmd_show)(path)

    @app.command(name="search")
    def search_cmd(query: str = typer.Argument(..., help="Text to look for")) -> None:
        """Search links."""
        _handle_stage_result(cmd_search)(query)

    @app.command(name="open")
    def open_cmd(path: str = typer.Argument(..., help="External path of the link")) -> None:
        """Open the external resource."""
        _handle_stage_result(cmd_open)(path)

    @app.command(name="categories")
    def categories_cmd() -> None:
        """List categories and audiences."""
        _handle_stage_result(cmd_categories)()

    @app.command(name="tags")
    def tags_cmd() -> None:
        """List tags."""
        _handle_stage_result(cmd_tags)()

    @app.command(name="tag-add")
    def tag_add_cmd(
        tag: str = typer.Argument(..., help="Tag to register"),
        apply_to_all: bool = typer.Option(False, "--all", help="Also add the tag to every link"),
    ) -> None:
        """Register a tag."""
        _handle_stage_result(cmd_tag_add)(tag, apply_to_all)

    return app
