"""Link categories API command.

CLI: dms link categories
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkCategoriesOutput
from ..config.load_config_with_output import load_config_with_output
from ..service.CollectingListener import CollectingListener
from ..service.open_service import open_service
from ..StageResult import StageResult


def cmd_categories() -> StageResult:
    """List configured categories and audiences plus any in use by stored links."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config, error_output = load_config_with_output(LinkCategoriesOutput, categories=[], audiences=[])
        if error_output is not None:
            yield (1.0, "Complete")
            result_obj.result = "Configuration validation failed"
            result_obj.output = error_output
            result_obj.success = False
            return

        listener = CollectingListener()
        yield (0.5, "Collecting categories...")
        with open_service(config, listener) as service:
            categories = service.get_categories()
            audiences = service.get_audiences()

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(categories)} categories and {len(audiences)} audiences"
        result_obj.output = LinkCategoriesOutput(
            errors=listener.errors,
            warnings=listener.warnings,
            categories=categories,
            audiences=audiences,
        ).model_dump(mode="python")
        result_obj.success = not listener.errors

    return StageResult(announce="Listing categories...", progress_callback=do_work)
