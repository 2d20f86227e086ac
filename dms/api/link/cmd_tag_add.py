"""Link tag-add API command.

CLI: dms link tag-add <tag> [--all]
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkTagsOutput
from ..config.load_config_with_output import load_config_with_output
from ..service.CollectingListener import CollectingListener
from ..service.open_service import open_service
from ..StageResult import StageResult
from .RecordValidationError import RecordValidationError


def cmd_tag_add(tag: str, apply_to_all: bool = False) -> StageResult:
    """Register a tag in the tag registry document, optionally tagging every link."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config, error_output = load_config_with_output(LinkTagsOutput, tag=tag, tags=[])
        if error_output is not None:
            yield (1.0, "Complete")
            result_obj.result = "Configuration validation failed"
            result_obj.output = error_output
            result_obj.success = False
            return

        listener = CollectingListener()
        added = False
        yield (0.5, f"Registering '{tag}'...")
        with open_service(config, listener) as service:
            try:
                added = service.add_tag(tag, apply_to_all=apply_to_all)
            except RecordValidationError as e:
                listener.errors.append(str(e))
            if not added and not listener.errors:
                listener.warnings.append(f"Tag '{tag.strip()}' is already registered")
            tags = service.get_tags()

        yield (1.0, "Complete")
        result_obj.result = f"Registered tag '{tag.strip()}'" if added else f"Tag '{tag.strip()}' not added"
        result_obj.output = LinkTagsOutput(
            errors=listener.errors,
            warnings=listener.warnings,
            tag=tag.strip(),
            tags=tags,
        ).model_dump(mode="python")
        result_obj.success = not listener.errors

    return StageResult(announce=f"Adding tag '{tag}'...", progress_callback=do_work)
