"""Link edit API command.

CLI: dms link edit <path> [--title ...] [--new-path ...] [--tags ...] ...
"""

from collections.abc import Iterator
from typing import Any

from .._output_schemas.link import LinkWriteOutput
from ..config.load_config_with_output import load_config_with_output
from ..service.CollectingListener import CollectingListener
from ..service.open_service import open_service
from ..StageResult import StageResult
from .RecordValidationError import RecordValidationError


def _as_list(value: str) -> list[str]:
    return [value] if value else []


def cmd_edit(
    path: str,
    title: str | None = None,
    new_path: str | None = None,
    categories: str | None = None,
    audience: str | None = None,
    tags: str | None = None,
    notes: str | None = None,
    summary: str | None = None,
    file_type: str | None = None,
) -> StageResult:
    """Edit the link stored under ``path``; ``None`` arguments keep the current value."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config, error_output = load_config_with_output(LinkWriteOutput, record={}, proxy_path="")
        if error_output is not None:
            yield (1.0, "Complete")
            result_obj.result = "Configuration validation failed"
            result_obj.output = error_output
            result_obj.success = False
            return

        listener = CollectingListener()
        stored = None
        proxy_path = ""
        yield (0.3, "Loading links...")
        with open_service(config, listener) as service:
            existing = service.get_by_path(path)
            if existing is None:
                listener.errors.append(f"No link for {path}")
            else:
                scalars = {"title": title, "path": new_path, "notes": notes, "summary": summary, "file_type": file_type}
                lists = {"categories": categories, "audience": audience, "tags": tags}
                update: dict[str, Any] = {name: value for name, value in scalars.items() if value is not None}
                update.update({name: _as_list(value) for name, value in lists.items() if value is not None})

                yield (0.6, f"Updating '{existing.title}'...")
                try:
                    if service.edit(existing.model_copy(update=update), original_path=path):
                        stored = service.get_by_path((new_path or path).strip())
                except RecordValidationError as e:
                    listener.errors.append(str(e))
                if stored is not None:
                    proxy_path = service.proxy_path(stored)

        yield (1.0, "Complete")
        result_obj.result = f"Updated '{stored.title}'" if stored is not None else f"Failed to update {path}"
        result_obj.output = LinkWriteOutput(
            errors=listener.errors,
            warnings=listener.warnings,
            record=stored.to_json() if stored is not None else {},
            proxy_path=proxy_path,
        ).model_dump(mode="python")
        result_obj.success = stored is not None and not listener.errors

    return StageResult(announce=f"Editing link {path}...", progress_callback=do_work)
