"""Link tags API command.

CLI: dms link tags
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkTagsOutput
from ..config.load_config_with_output import load_config_with_output
from ..service.CollectingListener import CollectingListener
from ..service.open_service import open_service
from ..StageResult import StageResult


def cmd_tags() -> StageResult:
    """List registered tags plus any in use by stored links."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config, error_output = load_config_with_output(LinkTagsOutput, tag="", tags=[])
        if error_output is not None:
            yield (1.0, "Complete")
            result_obj.result = "Configuration validation failed"
            result_obj.output = error_output
            result_obj.success = False
            return

        listener = CollectingListener()
        yield (0.5, "Collecting tags...")
        with open_service(config, listener) as service:
            tags = service.get_tags()

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(tags)} tag(s)"
        result_obj.output = LinkTagsOutput(
            errors=listener.errors,
            warnings=listener.warnings,
            tag="",
            tags=tags,
        ).model_dump(mode="python")
        result_obj.success = not listener.errors

    return StageResult(announce="Listing tags...", progress_callback=do_work)
