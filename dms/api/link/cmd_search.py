"""Link search API command.

CLI: dms link search <query>
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkListOutput
from ..config.load_config_with_output import load_config_with_output
from ..service.CollectingListener import CollectingListener
from ..service.open_service import open_service
from ..StageResult import StageResult


def cmd_search(query: str) -> StageResult:
    """Case-insensitive search over titles, paths, lists, notes and summaries."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config, error_output = load_config_with_output(LinkListOutput, query=query, links=[], count=0)
        if error_output is not None:
            yield (1.0, "Complete")
            result_obj.result = "Configuration validation failed"
            result_obj.output = error_output
            result_obj.success = False
            return

        listener = CollectingListener()
        yield (0.5, f"Searching for '{query}'...")
        with open_service(config, listener) as service:
            links = [record.to_json() for record in service.search(query)]

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(links)} link(s) matching '{query}'"
        result_obj.output = LinkListOutput(
            errors=listener.errors,
            warnings=listener.warnings,
            query=query,
            links=links,
            count=len(links),
        ).model_dump(mode="python")
        result_obj.success = not listener.errors

    return StageResult(announce=f"Searching links for '{query}'...", progress_callback=do_work)
