"""Sync service facade used by UI collaborators."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from ...utils.get_logger import get_logger
from ...utils.now_ms import now_ms
from ..config.MirrorConfig import MirrorConfig
from ..config.WatchConfig import WatchConfig
from ..docstore._AbstractBackend import _AbstractBackend
from ..docstore.DocumentStoreError import DocumentStoreError
from ..document.DocumentRenderer import DocumentRenderer
from ..link.ExternalLinkRecord import ExternalLinkRecord
from ..link.RecordValidationError import RecordValidationError
from ..link.validate_record import validate_record
from ..path.RootQualifier import default_root_qualifier
from ..path.slug import slug
from ..path.to_open_uri import to_open_uri
from ..proxy.ProxySynchronizer import ProxySynchronizer
from ..store.LinkStore import LinkStore
from ..store.StoreWriteError import StoreWriteError
from ..watch.ChangeWatcher import ChangeWatcher
from ..watch.SelfWriteRegistry import SelfWriteRegistry
from .SyncListener import NoticeLevel, NullListener, SyncListener
from .TagRegistry import TagRegistry

if TYPE_CHECKING:
    from ..config.DmsConfig import DmsConfig

logger = get_logger("service")


def _ordered_union(*groups: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for group in groups:
        for item in group:
            if item and item not in seen:
                seen.add(item)
                out.append(item)
    return out


class SyncService:
    """Composes the link store, proxy synchronizer and change watcher.

    Push operations mutate the store, persist it, then regenerate the proxy
    document, in that order. Validation problems raise
    ``RecordValidationError`` before anything changes; I/O problems are logged,
    reported through ``listener.notify`` and turn into a ``False`` return.
    Every state change ends with ``listener.refresh()``.
    """

    def __init__(
        self,
        link_store: LinkStore,
        document_store: _AbstractBackend,
        *,
        mirror: MirrorConfig | None = None,
        watch: WatchConfig | None = None,
        listener: SyncListener | None = None,
        clock: Callable[[], float] = time.monotonic,
        record_clock: Callable[[], int] = now_ms,
    ):
        self.mirror = mirror or MirrorConfig()
        watch = watch or WatchConfig()
        self.link_store = link_store
        self.document_store = document_store
        self.listener: SyncListener = listener or NullListener()
        self._record_clock = record_clock

        self.root_qualifier = default_root_qualifier(self.mirror.drive)
        self.renderer = DocumentRenderer(self.root_qualifier)
        self.self_writes = SelfWriteRegistry(watch.self_write_ttl_secs, clock)
        self.synchronizer = ProxySynchronizer(
            document_store,
            self.renderer,
            self.self_writes,
            mirror_root=self.mirror.root,
            extension=self.mirror.extension,
        )
        self.watcher = ChangeWatcher(
            link_store,
            document_store,
            self.synchronizer,
            self.self_writes,
            debounce_secs=watch.debounce_secs,
            clock=clock,
            record_clock=record_clock,
            on_applied=self.listener.refresh,
            on_error=lambda message: self.listener.notify("error", message),
        )
        self.tag_registry = TagRegistry(document_store, self.mirror.tag_registry)
        self._stop_watching: Callable[[], None] | None = None

    @classmethod
    def from_config(
        cls, config: DmsConfig, document_store: _AbstractBackend, listener: SyncListener | None = None
    ) -> SyncService:
        return cls(
            LinkStore(Path(config.store.path)),
            document_store,
            mirror=config.mirror,
            watch=config.watch,
            listener=listener,
        )

    # Error boundary

    def _report(self, level: NoticeLevel, message: str) -> None:
        if level == "error":
            logger.error(message)
        elif level == "warning":
            logger.warning(message)
        else:
            logger.info(message)
        self.listener.notify(level, message)

    def _persist_and_push(self, push: Callable[[], object], description: str) -> bool:
        try:
            self.link_store.save()
        except StoreWriteError as e:
            self._report("error", f"Could not save links while trying to {description}: {e}")
            self.listener.refresh()
            return False
        try:
            push()
        except (DocumentStoreError, OSError) as e:
            self._report("error", f"Saved links but could not update the proxy document ({description}): {e}")
            self.listener.refresh()
            return False
        self.listener.refresh()
        return True

    def _check_document_free(self, record: ExternalLinkRecord, ignore_path: str | None) -> None:
        target = slug(record.title)
        for other in self.link_store.all():
            if other.path != ignore_path and slug(other.title) == target:
                raise RecordValidationError(
                    f"'{record.title}' would share proxy document "
                    f"{self.synchronizer.proxy_path(record)} with '{other.title}'"
                )

    # Lifecycle

    def load(self) -> list[str]:
        """Load the snapshot file; read problems come back as warnings."""
        warnings = self.link_store.load()
        for warning in warnings:
            self.listener.notify("warning", warning)
        self.listener.refresh()
        return warnings

    def start_watching(self) -> None:
        if self._stop_watching is None:
            self._stop_watching = self.document_store.watch(self.watcher.on_event)

    def stop_watching(self) -> None:
        if self._stop_watching is not None:
            self._stop_watching()
            self._stop_watching = None

    def tick(self) -> int:
        """Run due pull work; see ``ChangeWatcher.tick``."""
        return self.watcher.tick()

    # Push operations

    def add(self, record: ExternalLinkRecord) -> bool:
        record = validate_record(record)
        if self.link_store.get(record.path) is not None:
            raise RecordValidationError(f"A link for {record.path} already exists")
        self._check_document_free(record, ignore_path=None)

        now = self._record_clock()
        record = record.model_copy(update={"created_date": record.created_date or now, "last_modified": now})
        self.link_store.upsert(record)
        return self._persist_and_push(lambda: self.synchronizer.create(record), f"add '{record.title}'")

    def edit(self, record: ExternalLinkRecord, original_path: str | None = None) -> bool:
        """Replace the record at ``original_path`` (default: ``record.path``)."""
        record = validate_record(record)
        key = original_path or record.path
        existing = self.link_store.get(key)
        if existing is None:
            raise RecordValidationError(f"No link for {key}")
        if key != record.path and self.link_store.get(record.path) is not None:
            raise RecordValidationError(f"A link for {record.path} already exists")
        self._check_document_free(record, ignore_path=key)

        updated = record.model_copy(
            update={
                "created_date": record.created_date or existing.created_date,
                "last_modified": self._record_clock(),
            }
        )
        if key != updated.path:
            self.link_store.remove(key)
        self.link_store.upsert(updated)
        return self._persist_and_push(
            lambda: self.synchronizer.update(updated, previous_title=existing.title),
            f"edit '{updated.title}'",
        )

    def delete(self, target: ExternalLinkRecord | str) -> bool:
        path = target.path if isinstance(target, ExternalLinkRecord) else target
        existing = self.link_store.remove(path)
        if existing is None:
            return False
        return self._persist_and_push(lambda: self.synchronizer.delete(existing), f"delete '{existing.title}'")

    def resync(self) -> int:
        """Regenerate every proxy document from the store. Returns how many were written."""
        written = 0
        for record in self.link_store.all():
            try:
                self.synchronizer.create(record)
                written += 1
            except (DocumentStoreError, OSError) as e:
                self._report("error", f"Could not write proxy document for '{record.title}': {e}")
        self.listener.refresh()
        return written

    def add_tag(self, tag: str, *, apply_to_all: bool = False) -> bool:
        """Register ``tag``; with ``apply_to_all`` also add it to every link and re-render their documents.

        Returns True when the tag was newly registered, False when it already was
        or an I/O error was reported.
        """
        tag = tag.strip()
        if not tag or "," in tag:
            raise RecordValidationError("tag must be non-empty and must not contain commas")
        try:
            added = self.tag_registry.add(tag)
        except (DocumentStoreError, OSError) as e:
            self._report("error", f"Could not register tag '{tag}': {e}")
            return False
        if apply_to_all:
            now = self._record_clock()
            retagged = []
            for record in self.link_store.all():
                if tag not in record.tags:
                    updated = record.model_copy(update={"tags": [*record.tags, tag], "last_modified": now})
                    self.link_store.upsert(updated)
                    retagged.append(updated)

            def push_all() -> None:
                for record in retagged:
                    self.synchronizer.create(record)

            if retagged and not self._persist_and_push(push_all, f"tag {len(retagged)} links with '{tag}'"):
                return False
        self.listener.refresh()
        return added

    # Queries

    def get_all(self) -> list[ExternalLinkRecord]:
        return self.link_store.all()

    def get_by_path(self, path: str) -> ExternalLinkRecord | None:
        return self.link_store.get(path)

    def get_categories(self) -> list[str]:
        return _ordered_union(self.mirror.categories, *(r.categories for r in self.link_store.all()))

    def get_audiences(self) -> list[str]:
        return _ordered_union(self.mirror.audiences, *(r.audience for r in self.link_store.all()))

    def get_tags(self) -> list[str]:
        try:
            registered = self.tag_registry.tags()
        except (DocumentStoreError, OSError) as e:
            self._report("warning", f"Could not read tag registry: {e}")
            registered = []
        return _ordered_union(registered, *(r.tags for r in self.link_store.all()))

    def search(self, query: str) -> list[ExternalLinkRecord]:
        """Case-insensitive substring search over every text field."""
        needle = query.strip().lower()
        if not needle:
            return self.get_all()

        def matches(record: ExternalLinkRecord) -> bool:
            haystack = [record.title, record.path, record.notes, record.summary]
            haystack.extend(record.categories)
            haystack.extend(record.audience)
            haystack.extend(record.tags)
            return any(needle in value.lower() for value in haystack)

        return [record for record in self.link_store.all() if matches(record)]

    def proxy_path(self, record: ExternalLinkRecord) -> str:
        return self.synchronizer.proxy_path(record)

    def open_target(self, path: str) -> str:
        """Launcher target for an external path: URLs as-is, local paths as file URIs."""
        return to_open_uri(path, self.root_qualifier)
