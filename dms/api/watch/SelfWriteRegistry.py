"""Short-lived markers for changes the engine made itself."""

import hashlib
import threading
import time
from collections.abc import Callable

from ..docstore.ChangeEvent import ChangeEvent, ChangeKind


def _digest(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


class SelfWriteRegistry:
    """Remembers what the synchronizer just wrote, renamed or deleted.

    The watcher asks ``consume`` on first sight of a change; a match drops the
    marker and tells the caller the change is its own echo. Markers expire
    after ``ttl_secs`` so a notification that never arrives cannot hide a later
    user edit.
    """

    def __init__(self, ttl_secs: float = 30.0, clock: Callable[[], float] = time.monotonic):
        self.ttl_secs = ttl_secs
        self._clock = clock
        self._markers: dict[tuple[ChangeKind, str], tuple[str | None, float]] = {}
        self._lock = threading.Lock()

    def _put(self, kind: ChangeKind, path: str, digest: str | None) -> None:
        now = self._clock()
        with self._lock:
            # Drop markers whose echo never arrived
            for key in [key for key, (_, expires_at) in self._markers.items() if now > expires_at]:
                del self._markers[key]
            self._markers[(kind, path)] = (digest, now + self.ttl_secs)

    def expect_write(self, path: str, text: str) -> None:
        self._put("modify", path, _digest(text))

    def expect_delete(self, path: str) -> None:
        self._put("delete", path, None)

    def expect_rename(self, old_path: str, new_path: str) -> None:
        self._put("rename", new_path, old_path)

    def consume(self, event: ChangeEvent, text: str | None = None) -> bool:
        """True when ``event`` (with current ``text`` for modifies) is self-originated."""
        key = (event.kind, event.path)
        with self._lock:
            marker = self._markers.get(key)
            if marker is None:
                return False
            expected, expires_at = marker
            if self._clock() > expires_at:
                del self._markers[key]
                return False
            if event.kind == "modify":
                matched = text is not None and _digest(text) == expected
            elif event.kind == "rename":
                matched = expected == event.old_path
            else:
                matched = True
            if matched:
                del self._markers[key]
            return matched

    def __len__(self) -> int:
        return len(self._markers)
