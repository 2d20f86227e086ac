"""Pull direction: debounced proxy-document changes back into the link store."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from posixpath import basename, splitext
from typing import TYPE_CHECKING

from ...utils.get_logger import get_logger
from ...utils.now_ms import now_ms
from ..docstore._AbstractBackend import _AbstractBackend
from ..docstore.ChangeEvent import ChangeEvent
from ..link.ExternalLinkRecord import ExternalLinkRecord
from ..path.slug import slug
from ..store.LinkStore import LinkStore
from .SelfWriteRegistry import SelfWriteRegistry
from .WatcherState import WatcherState

if TYPE_CHECKING:
    from ..proxy.ProxySynchronizer import ProxySynchronizer

logger = get_logger("watch")


class ChangeWatcher:
    """Turns change notifications under the mirror root into store updates.

    ``on_event`` may be called from any thread (watchdog observers); it only
    records work. ``tick`` does the work on the caller's thread: a modified
    document is handled once it has been quiet for ``debounce_secs``, using the
    content present at that moment, while deletes and renames are handled on
    the next tick. While a document is being handled the reentrancy guard is
    held and notifications for that document are dropped.
    """

    def __init__(
        self,
        link_store: LinkStore,
        document_store: _AbstractBackend,
        synchronizer: ProxySynchronizer,
        self_writes: SelfWriteRegistry,
        *,
        debounce_secs: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        record_clock: Callable[[], int] = now_ms,
        on_applied: Callable[[], None] | None = None,
        on_error: Callable[[str], None] | None = None,
    ):
        self.link_store = link_store
        self.document_store = document_store
        self.synchronizer = synchronizer
        self.renderer = synchronizer.renderer
        self.self_writes = self_writes
        self.debounce_secs = debounce_secs
        self._clock = clock
        self._record_clock = record_clock
        self.on_applied = on_applied
        self.on_error = on_error

        self._lock = threading.Lock()
        # path -> deadline for debounced modifies
        self._pending: dict[str, float] = {}
        # deletes and renames, handled in arrival order
        self._immediate: list[ChangeEvent] = []
        self._handling = False
        self._handling_path: str | None = None
        self.applied_count = 0

    @property
    def state(self) -> WatcherState:
        if self._handling:
            return WatcherState.HANDLING
        if self._pending or self._immediate:
            return WatcherState.PENDING
        return WatcherState.IDLE

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending) + len(self._immediate)

    def _in_scope(self, path: str | None) -> bool:
        return path is not None and self.synchronizer.is_proxy_path(path)

    def on_event(self, event: ChangeEvent) -> None:
        """Record a change notification; no I/O happens here."""
        if self._handling and self._handling_path in (event.path, event.old_path):
            logger.debug("Dropping %s on %s during handling", event.kind, event.path)
            return

        if event.kind == "rename":
            old_in, new_in = self._in_scope(event.old_path), self._in_scope(event.path)
            if old_in and not new_in:
                event = ChangeEvent(kind="delete", path=event.old_path or "")
            elif new_in and not old_in:
                event = ChangeEvent(kind="modify", path=event.path)
            elif not (old_in and new_in):
                return
        elif not self._in_scope(event.path):
            return

        with self._lock:
            if event.kind == "modify":
                self._pending[event.path] = self._clock() + self.debounce_secs
            elif event.kind == "delete":
                self._pending.pop(event.path, None)
                self._immediate.append(event)
            else:
                deadline = self._pending.pop(event.old_path or "", None)
                if deadline is not None:
                    self._pending[event.path] = deadline
                self._immediate.append(event)

    def _take_due(self, force: bool) -> list[ChangeEvent]:
        now = self._clock()
        with self._lock:
            due = list(self._immediate)
            self._immediate.clear()
            for path, deadline in list(self._pending.items()):
                if force or deadline <= now:
                    del self._pending[path]
                    due.append(ChangeEvent(kind="modify", path=path))
        return due

    def tick(self) -> int:
        """Handle every due change. Returns the number of store updates applied."""
        return self._run(force=False)

    def flush(self) -> int:
        """Handle everything pending regardless of debounce deadlines."""
        return self._run(force=True)

    def _run(self, force: bool) -> int:
        if self._handling:
            return 0
        applied = 0
        for event in self._take_due(force):
            self._handling = True
            self._handling_path = event.path
            try:
                if self._handle(event):
                    applied += 1
            except Exception as exc:
                message = f"Failed to apply {event.kind} of {event.path}: {exc}"
                logger.exception(message)
                if self.on_error:
                    self.on_error(message)
            finally:
                self._handling = False
                self._handling_path = None
        self.applied_count += applied
        return applied

    def _handle(self, event: ChangeEvent) -> bool:
        if event.kind == "delete":
            return self._handle_delete(event)
        if event.kind == "rename":
            return self._handle_rename(event)
        return self._handle_modify(event)

    def _record_for_document(self, path: str) -> ExternalLinkRecord | None:
        """The record whose proxy path the document name maps to, by slug."""
        target = self.synchronizer.proxy_path_for_title(splitext(basename(path))[0])
        for record in self.link_store.all():
            if self.synchronizer.proxy_path(record) == target:
                return record
        return None

    def _owned_elsewhere(self, record: ExternalLinkRecord, path: str) -> bool:
        """True when ``record`` has its own proxy document and ``path`` is not it."""
        own = self.synchronizer.proxy_path(record)
        return own != path and self.document_store.exists(own)

    def _commit(self, record: ExternalLinkRecord) -> None:
        self.link_store.upsert(record)
        self.link_store.save(bump_version=False)
        if self.on_applied:
            self.on_applied()

    def _handle_modify(self, event: ChangeEvent) -> bool:
        if not self.document_store.exists(event.path):
            return False
        text = self.document_store.read(event.path)
        if self.self_writes.consume(event, text):
            logger.debug("Ignoring self-originated write to %s", event.path)
            return False

        partial = self.renderer.parse(text)
        if not partial.external_path:
            logger.debug("No recognizable header in %s", event.path)
            return False
        record = self.link_store.get(partial.external_path)
        if record is None:
            logger.debug("%s points at unknown path %s", event.path, partial.external_path)
            return False
        if event.path != self.synchronizer.proxy_path(record):
            # Copies carry the header too; only the record's own document is pulled
            logger.warning(
                "Ignoring %s: the proxy document for %s is %s",
                event.path,
                record.path,
                self.synchronizer.proxy_path(record),
            )
            return False

        update: dict = {}
        for name in ("categories", "audience", "tags", "notes", "summary"):
            value = getattr(partial, name)
            if value is not None:
                update[name] = value
        updated = record.model_copy(update=update)
        if updated.same_content(record):
            return False

        updated.last_modified = self._record_clock()
        self._commit(updated)
        logger.info("Pulled %s into %s", event.path, record.path)
        return True

    def _handle_delete(self, event: ChangeEvent) -> bool:
        if self.self_writes.consume(event):
            return False
        if self.document_store.exists(event.path):
            # Deleted and recreated before we got here
            return False
        record = self._record_for_document(event.path)
        if record is None or self._owned_elsewhere(record, event.path):
            return False
        self.link_store.remove(record.path)
        self.link_store.save(bump_version=False)
        if self.on_applied:
            self.on_applied()
        logger.info("Proxy document %s deleted, removed record %s", event.path, record.path)
        return True

    def _handle_rename(self, event: ChangeEvent) -> bool:
        if self.self_writes.consume(event):
            return False
        record = None
        if self.document_store.exists(event.path):
            partial = self.renderer.parse(self.document_store.read(event.path))
            if partial.external_path:
                record = self.link_store.get(partial.external_path)
        if record is None and event.old_path:
            record = self._record_for_document(event.old_path)
        if record is None or self._owned_elsewhere(record, event.path):
            return False
        if event.old_path and self._owned_elsewhere(record, event.old_path):
            logger.debug("Rename of %s does not involve the proxy document of %s", event.old_path, record.path)
            return False

        stem = splitext(basename(event.path))[0]
        # The document name only carries the slug; keep the richer title while it still maps there
        title = record.title if slug(record.title) == slug(stem) else stem
        target = self.synchronizer.proxy_path_for_title(title)
        for other in self.link_store.all():
            if other.path != record.path and self.synchronizer.proxy_path(other) == target:
                message = f"Cannot retitle '{record.title}' to '{title}': {target} belongs to '{other.title}'"
                logger.warning(message)
                if self.on_error:
                    self.on_error(message)
                self.synchronizer.relocate(event.path, record)
                return False

        changed = title != record.title
        if changed:
            record = record.model_copy(update={"title": title, "last_modified": self._record_clock()})
            self._commit(record)
            logger.info("Proxy document renamed %s -> %s, retitled %s", event.old_path, event.path, record.path)
        # Names that are not slugs move to the slug so the record keeps exactly one document
        self.synchronizer.relocate(event.path, record)
        return changed
