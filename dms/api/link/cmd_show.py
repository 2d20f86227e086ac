"""Link show API command.

CLI: dms link show <path>
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkShowOutput
from ..config.load_config_with_output import load_config_with_output
from ..service.CollectingListener import CollectingListener
from ..service.open_service import open_service
from ..StageResult import StageResult


def cmd_show(path: str) -> StageResult:
    """Show one link and where its proxy document lives."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config, error_output = load_config_with_output(LinkShowOutput, path=path, found=False, record={}, proxy_path="")
        if error_output is not None:
            yield (1.0, "Complete")
            result_obj.result = "Configuration validation failed"
            result_obj.output = error_output
            result_obj.success = False
            return

        listener = CollectingListener()
        yield (0.5, f"Looking up {path}...")
        with open_service(config, listener) as service:
            record = service.get_by_path(path)
            proxy_path = service.proxy_path(record) if record is not None else ""

        if record is None:
            listener.errors.append(f"No link for {path}")

        yield (1.0, "Complete")
        result_obj.result = f"Found '{record.title}'" if record is not None else f"No link for {path}"
        result_obj.output = LinkShowOutput(
            errors=listener.errors,
            warnings=listener.warnings,
            path=path,
            found=record is not None,
            record=record.to_json() if record is not None else {},
            proxy_path=proxy_path,
        ).model_dump(mode="python")
        result_obj.success = record is not None

    return StageResult(announce=f"Showing link {path}...", progress_callback=do_work)
