"""Sync API command.

CLI: dms sync
"""

import time
from collections.abc import Iterator

from .._output_schemas.sync import SyncOutput
from ..config.load_config_with_output import load_config_with_output
from ..service.CollectingListener import CollectingListener
from ..service.open_service import open_service
from ..StageResult import StageResult


def cmd_sync() -> StageResult:
    """Regenerate every proxy document from the link store."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config, error_output = load_config_with_output(
            SyncOutput, documents_written=0, records=0, version=0, sync_duration_ms=0
        )
        if error_output is not None:
            yield (1.0, "Complete")
            result_obj.result = "Configuration validation failed"
            result_obj.output = error_output
            result_obj.success = False
            return

        listener = CollectingListener()
        started = time.perf_counter()
        yield (0.3, "Loading links...")
        with open_service(config, listener) as service:
            records = len(service.get_all())
            yield (0.5, f"Writing {records} proxy document(s)...")
            written = service.resync()
            version = service.link_store.version
        duration_ms = int((time.perf_counter() - started) * 1000)

        yield (1.0, "Complete")
        result_obj.result = f"Synced {written} of {records} proxy document(s)"
        result_obj.output = SyncOutput(
            errors=listener.errors,
            warnings=listener.warnings,
            documents_written=written,
            records=records,
            version=version,
            sync_duration_ms=duration_ms,
        ).model_dump(mode="python")
        result_obj.success = written == records and not listener.errors

    return StageResult(announce="Syncing proxy documents...", progress_callback=do_work)
