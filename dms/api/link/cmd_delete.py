"""Link delete API command.

CLI: dms link delete <path>
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkDeleteOutput
from ..config.load_config_with_output import load_config_with_output
from ..service.CollectingListener import CollectingListener
from ..service.open_service import open_service
from ..StageResult import StageResult


def cmd_delete(path: str) -> StageResult:
    """Delete the link stored under ``path`` together with its proxy document."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config, error_output = load_config_with_output(LinkDeleteOutput, path=path, deleted=False)
        if error_output is not None:
            yield (1.0, "Complete")
            result_obj.result = "Configuration validation failed"
            result_obj.output = error_output
            result_obj.success = False
            return

        listener = CollectingListener()
        yield (0.3, "Loading links...")
        with open_service(config, listener) as service:
            if service.get_by_path(path) is None:
                listener.errors.append(f"No link for {path}")
                deleted = False
            else:
                yield (0.6, f"Deleting {path}...")
                deleted = service.delete(path)

        yield (1.0, "Complete")
        result_obj.result = f"Deleted {path}" if deleted else f"Failed to delete {path}"
        result_obj.output = LinkDeleteOutput(
            errors=listener.errors,
            warnings=listener.warnings,
            path=path,
            deleted=deleted,
        ).model_dump(mode="python")
        result_obj.success = deleted and not listener.errors

    return StageResult(announce=f"Deleting link {path}...", progress_callback=do_work)
