"""Open a loaded sync service for the duration of a command."""

from collections.abc import Iterator
from contextlib import contextmanager

from ..config.DmsConfig import DmsConfig
from ..docstore.DocumentStore import DocumentStore
from .SyncListener import SyncListener
from .SyncService import SyncService


@contextmanager
def open_service(config: DmsConfig, listener: SyncListener | None = None) -> Iterator[SyncService]:
    """Yield a ``SyncService`` over the configured document store, snapshot already loaded.

    Watching is stopped and the document store released on exit.
    """
    with DocumentStore(config.docstore) as document_store:
        service = SyncService.from_config(config, document_store, listener)
        service.load()
        try:
            yield service
        finally:
            service.stop_watching()
