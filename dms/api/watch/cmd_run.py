"""Watch API command.

CLI: dms watch
"""

import time
from collections.abc import Callable, Iterator
from contextlib import suppress
from pathlib import Path

from .._output_schemas.watch import WatchRunOutput
from ..config.load_config_with_output import load_config_with_output
from ..service.CollectingListener import CollectingListener
from ..service.open_service import open_service
from ..StageResult import StageResult


def _mtime(path: Path) -> float:
    with suppress(OSError):
        return path.stat().st_mtime
    return 0.0


def cmd_run(duration_secs: float | None = None, sleep: Callable[[float], None] = time.sleep) -> StageResult:
    """Watch the mirror directory and pull document edits into the store.

    Runs in the foreground until interrupted (Ctrl-C) or until ``duration_secs``
    have elapsed. Pending changes are flushed before returning.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config, error_output = load_config_with_output(
            WatchRunOutput, mirror_root="", events_handled=0, duration_secs=0.0
        )
        if error_output is not None:
            yield (1.0, "Complete")
            result_obj.result = "Configuration validation failed"
            result_obj.output = error_output
            result_obj.success = False
            return

        listener = CollectingListener()
        started = time.monotonic()
        snapshot_path = Path(config.store.path)
        yield (0.3, f"Watching {config.mirror.root}...")
        with open_service(config, listener) as service:
            service.synchronizer.ensure_mirror_root()
            service.start_watching()
            seen_mtime = _mtime(snapshot_path)
            try:
                while duration_secs is None or time.monotonic() - started < duration_secs:
                    # Another process may have pushed; reconcile before applying pulls
                    current_mtime = _mtime(snapshot_path)
                    if current_mtime != seen_mtime:
                        service.load()
                        seen_mtime = current_mtime
                    service.tick()
                    seen_mtime = _mtime(snapshot_path)
                    sleep(config.watch.poll_interval_secs)
            except KeyboardInterrupt:
                pass
            service.stop_watching()
            service.watcher.flush()
            handled = service.watcher.applied_count

        yield (1.0, "Complete")
        elapsed = time.monotonic() - started
        result_obj.result = f"Applied {handled} document change(s) in {elapsed:.1f}s"
        result_obj.output = WatchRunOutput(
            errors=listener.errors,
            warnings=listener.warnings,
            mirror_root=config.mirror.root,
            events_handled=handled,
            duration_secs=round(elapsed, 3),
        ).model_dump(mode="python")
        result_obj.success = not listener.errors

    return StageResult(announce="Starting watcher...", progress_callback=do_work)
