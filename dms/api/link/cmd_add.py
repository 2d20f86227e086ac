"""Link add API command.

CLI: dms link add <path> --title <title> [--categories a,b] [--tags x,y] ...
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkWriteOutput
from ..config.load_config_with_output import load_config_with_output
from ..service.CollectingListener import CollectingListener
from ..service.open_service import open_service
from ..StageResult import StageResult
from ._build_record import _build_record
from .RecordValidationError import RecordValidationError


def cmd_add(
    path: str,
    title: str,
    categories: str = "",
    audience: str = "",
    tags: str = "",
    notes: str = "",
    summary: str = "",
    file_type: str = "",
    size: int = 0,
) -> StageResult:
    """Add a link and write its proxy document.

    Args:
        path: URL or local path of the external resource (the record key).
        title: Display title; also names the proxy document.
        categories: Comma-separated categories.
        audience: Comma-separated audiences.
        tags: Comma-separated tags.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config, error_output = load_config_with_output(LinkWriteOutput, record={}, proxy_path="")
        if error_output is not None:
            yield (1.0, "Complete")
            result_obj.result = "Configuration validation failed"
            result_obj.output = error_output
            result_obj.success = False
            return

        record = _build_record(path, title, categories, audience, tags, notes, summary, file_type, size)
        listener = CollectingListener()
        yield (0.3, "Loading links...")
        with open_service(config, listener) as service:
            yield (0.6, f"Adding '{title}'...")
            try:
                added = service.add(record)
            except RecordValidationError as e:
                listener.errors.append(str(e))
                added = False
            stored = service.get_by_path(path.strip()) if added else None
            proxy_path = service.proxy_path(stored) if stored is not None else ""

        yield (1.0, "Complete")
        result_obj.result = f"Added '{stored.title}'" if stored is not None else f"Failed to add '{title}'"
        result_obj.output = LinkWriteOutput(
            errors=listener.errors,
            warnings=listener.warnings,
            record=stored.to_json() if stored is not None else {},
            proxy_path=proxy_path,
        ).model_dump(mode="python")
        result_obj.success = stored is not None and not listener.errors

    return StageResult(announce=f"Adding link {path}...", progress_callback=do_work)
