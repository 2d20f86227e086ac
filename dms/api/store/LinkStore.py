"""Versioned link store backed by a single snapshot file."""

import json
import tempfile
from collections.abc import Callable, Iterable
from contextlib import suppress
from pathlib import Path

from pydantic import ValidationError

from ...utils.get_logger import get_logger
from ...utils.now_ms import now_ms
from ..link.ExternalLinkRecord import ExternalLinkRecord
from .LinkStoreSnapshot import LinkStoreSnapshot
from .merge_records import merge_records
from .StoreWriteError import StoreWriteError

logger = get_logger("store")


class LinkStore:
    """Owns the in-memory snapshot and its file.

    Records are keyed by ``path``. Push-originated saves bump ``version``;
    pull-originated saves pass ``bump_version=False`` so a push/pull round
    trip does not race the counter.
    """

    def __init__(self, snapshot_path: Path, clock: Callable[[], int] = now_ms):
        self.snapshot_path = Path(snapshot_path)
        self._clock = clock
        self._version = 0
        self._last_modified = 0
        self._records: dict[str, ExternalLinkRecord] = {}
        self._loaded = False

    @property
    def version(self) -> int:
        return self._version

    @property
    def last_modified(self) -> int:
        return self._last_modified

    def snapshot(self) -> LinkStoreSnapshot:
        return LinkStoreSnapshot(
            version=self._version,
            last_modified=self._last_modified,
            links=list(self._records.values()),
        )

    def all(self) -> list[ExternalLinkRecord]:
        return list(self._records.values())

    def get(self, path: str) -> ExternalLinkRecord | None:
        return self._records.get(path)

    def upsert(self, record: ExternalLinkRecord) -> None:
        self._records[record.path] = record

    def remove(self, path: str) -> ExternalLinkRecord | None:
        return self._records.pop(path, None)

    def merge_from(self, incoming: Iterable[ExternalLinkRecord]) -> None:
        inserted, replaced, discarded = merge_records(self._records, incoming)
        logger.debug("Merged snapshot: %d inserted, %d replaced, %d discarded", inserted, replaced, discarded)

    def _read_snapshot(self) -> tuple[LinkStoreSnapshot, list[str]]:
        if not self.snapshot_path.exists():
            logger.info("No snapshot at %s, starting empty", self.snapshot_path)
            return LinkStoreSnapshot(), []
        try:
            with self.snapshot_path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
            return LinkStoreSnapshot.model_validate(raw), []
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            message = f"Failed to read link snapshot {self.snapshot_path}: {e}"
            logger.warning(message)
            return LinkStoreSnapshot(), [message]

    def load(self) -> list[str]:
        """Reconcile the in-memory snapshot with the file.

        The first load, or a strictly newer file version, replaces memory. An equal version with a
        newer file timestamp (a pull-originated save elsewhere) is merged record
        by record. A missing or corrupt file reads as an empty store.

        Returns:
            Warning messages for the caller to surface; never raises on read errors.
        """
        loaded, warnings = self._read_snapshot()
        if loaded.version > self._version or not self._loaded:
            self._loaded = True
            self._version = loaded.version
            self._last_modified = loaded.last_modified
            self._records = {}
            for record in loaded.links:
                self._records[record.path] = record
            logger.info("Loaded snapshot version %d with %d links", self._version, len(self._records))
        elif loaded.version == self._version and loaded.last_modified > self._last_modified:
            self.merge_from(loaded.links)
            self._last_modified = loaded.last_modified
            logger.info("Merged snapshot version %d (%d links)", self._version, len(self._records))
        return warnings

    def save(self, bump_version: bool = True) -> None:
        """Write the whole snapshot atomically.

        Raises:
            StoreWriteError: If the file cannot be written. Memory is not rolled back.
        """
        if bump_version:
            self._version += 1
        self._last_modified = self._clock()

        content = json.dumps(self.snapshot().to_json(), indent=2, ensure_ascii=False)
        tmp_path: Path | None = None
        try:
            self.snapshot_path.parent.mkdir(parents=True, exist_ok=True)
            # Temp file in the target directory so the replace stays on one device
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self.snapshot_path.parent,
                delete=False,
                prefix=f"{self.snapshot_path.name}.",
                suffix=".tmp",
            ) as fh:
                tmp_path = Path(fh.name)
                fh.write(content)
            tmp_path.replace(self.snapshot_path)
        except OSError as e:
            if tmp_path is not None:
                with suppress(OSError):
                    tmp_path.unlink()
            logger.error("Failed to save link snapshot %s: %s", self.snapshot_path, e)
            raise StoreWriteError(f"Failed to save link snapshot: {e}") from e
        logger.debug("Saved snapshot version %d (bump=%s)", self._version, bump_version)
