"""Link open API command.

CLI: dms link open <path>
"""

from collections.abc import Callable, Iterator

import typer

from .._output_schemas.link import LinkOpenOutput
from ..config.load_config_with_output import load_config_with_output
from ..service.CollectingListener import CollectingListener
from ..service.open_service import open_service
from ..StageResult import StageResult


def cmd_open(path: str, launcher: Callable[[str], int] | None = None) -> StageResult:
    """Open the external resource of a stored link with the system launcher.

    Args:
        path: External path of a stored link.
        launcher: Callable taking the target and returning an exit code; defaults to ``typer.launch``.
    """
    launch = launcher or typer.launch

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config, error_output = load_config_with_output(LinkOpenOutput, path=path, target="", launched=False)
        if error_output is not None:
            yield (1.0, "Complete")
            result_obj.result = "Configuration validation failed"
            result_obj.output = error_output
            result_obj.success = False
            return

        listener = CollectingListener()
        target = ""
        with open_service(config, listener) as service:
            if service.get_by_path(path) is None:
                listener.errors.append(f"No link for {path}")
            else:
                target = service.open_target(path)

        launched = False
        if target:
            yield (0.7, f"Launching {target}...")
            exit_code = launch(target)
            launched = exit_code == 0
            if not launched:
                listener.errors.append(f"Launcher exited with code {exit_code}")

        yield (1.0, "Complete")
        result_obj.result = f"Opened {target}" if launched else f"Could not open {path}"
        result_obj.output = LinkOpenOutput(
            errors=listener.errors,
            warnings=listener.warnings,
            path=path,
            target=target,
            launched=launched,
        ).model_dump(mode="python")
        result_obj.success = launched

    return StageResult(announce=f"Opening {path}...", progress_callback=do_work)
