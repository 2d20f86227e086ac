"""Link list API command.

CLI: dms link list
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkListOutput
from ..config.load_config_with_output import load_config_with_output
from ..service.CollectingListener import CollectingListener
from ..service.open_service import open_service
from ..StageResult import StageResult


def cmd_list() -> StageResult:
    """List every stored link."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config, error_output = load_config_with_output(LinkListOutput, query="", links=[], count=0)
        if error_output is not None:
            yield (1.0, "Complete")
            result_obj.result = "Configuration validation failed"
            result_obj.output = error_output
            result_obj.success = False
            return

        listener = CollectingListener()
        yield (0.5, "Loading links...")
        with open_service(config, listener) as service:
            links = [record.to_json() for record in service.get_all()]

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(links)} link(s)"
        result_obj.output = LinkListOutput(
            errors=listener.errors,
            warnings=listener.warnings,
            query="",
            links=links,
            count=len(links),
        ).model_dump(mode="python")
        result_obj.success = not listener.errors

    return StageResult(announce="Listing links...", progress_callback=do_work)
