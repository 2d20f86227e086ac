"""In-memory document store backend (tests, dry runs)."""

import threading
from collections.abc import Callable
from posixpath import dirname, normpath

from .._AbstractBackend import _AbstractBackend
from ..ChangeEvent import ChangeEvent
from ..DocumentStoreConfig import DocumentStoreConfig
from ..DocumentStoreError import DocumentStoreError


def _norm(path: str) -> str:
    cleaned = normpath(path.replace("\\", "/")).strip("/")
    return "" if cleaned == "." else cleaned


class _Impl(_AbstractBackend):
    """Dict-backed store that notifies subscribers synchronously."""

    def __init__(self, docstore_config: DocumentStoreConfig | None = None):
        self.docstore_config = docstore_config
        self.files: dict[str, str] = {}
        self.directories: set[str] = {""}
        self._subscribers: list[Callable[[ChangeEvent], None]] = []
        self._lock = threading.Lock()

    def _emit(self, event: ChangeEvent) -> None:
        for callback in list(self._subscribers):
            callback(event)

    def _require_parent(self, path: str) -> None:
        parent = dirname(path)
        if parent not in self.directories:
            raise DocumentStoreError(f"Parent directory does not exist: {parent or '/'}")

    def exists(self, path: str) -> bool:
        path = _norm(path)
        return path in self.files or path in self.directories

    def read(self, path: str) -> str:
        path = _norm(path)
        try:
            return self.files[path]
        except KeyError:
            raise DocumentStoreError(f"No such document: {path}") from None

    def write(self, path: str, text: str) -> None:
        path = _norm(path)
        with self._lock:
            self._require_parent(path)
            if path in self.directories:
                raise DocumentStoreError(f"Is a directory: {path}")
            self.files[path] = text
        self._emit(ChangeEvent(kind="modify", path=path))

    def delete(self, path: str) -> None:
        path = _norm(path)
        with self._lock:
            if path not in self.files:
                raise DocumentStoreError(f"No such document: {path}")
            del self.files[path]
        self._emit(ChangeEvent(kind="delete", path=path))

    def rename(self, old_path: str, new_path: str) -> None:
        old_path = _norm(old_path)
        new_path = _norm(new_path)
        with self._lock:
            if old_path not in self.files:
                raise DocumentStoreError(f"No such document: {old_path}")
            self._require_parent(new_path)
            self.files[new_path] = self.files.pop(old_path)
        self._emit(ChangeEvent(kind="rename", path=new_path, old_path=old_path))

    def create_directory(self, path: str) -> None:
        path = _norm(path)
        with self._lock:
            if path in self.files:
                raise DocumentStoreError(f"A document already exists at {path}")
            self._require_parent(path)
            self.directories.add(path)

    def watch(self, callback: Callable[[ChangeEvent], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def stop() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return stop
