"""Local filesystem document store backend."""

from collections.abc import Callable
from contextlib import suppress
from pathlib import Path
from typing import Any

from watchdog.observers import Observer

from ....utils.get_logger import get_logger
from .._AbstractBackend import _AbstractBackend
from ..ChangeEvent import ChangeEvent
from ..DocumentStoreConfig import DocumentStoreConfig
from ..DocumentStoreError import DocumentStoreError
from ._EventHandler import _EventHandler

logger = get_logger("docstore.filesystem")


class _Impl(_AbstractBackend):
    """Documents are plain files below ``base_dir``; changes come from watchdog."""

    def __init__(self, docstore_config: DocumentStoreConfig):
        if not docstore_config.base_dir:
            raise ValueError("docstore.base_dir is required for the filesystem backend")
        self.base_dir = Path(docstore_config.base_dir)
        self._observers: list[Any] = []

    def __enter__(self) -> "_Impl":
        if not self.base_dir.is_dir():
            raise DocumentStoreError(f"Document store directory does not exist: {self.base_dir}")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        for observer in self._observers:
            with suppress(Exception):
                observer.stop()
                observer.join()
        self._observers.clear()

    def _abs(self, path: str) -> Path:
        target = (self.base_dir / path.replace("\\", "/").lstrip("/")).absolute()
        # Keep every operation inside the store
        try:
            target.resolve().relative_to(self.base_dir.resolve())
        except ValueError:
            raise DocumentStoreError(f"Path escapes the document store: {path}") from None
        return target

    def exists(self, path: str) -> bool:
        return self._abs(path).exists()

    def read(self, path: str) -> str:
        try:
            return self._abs(path).read_text(encoding="utf-8")
        except OSError as e:
            raise DocumentStoreError(f"Failed to read {path}: {e}") from e

    def write(self, path: str, text: str) -> None:
        target = self._abs(path)
        if not target.parent.is_dir():
            raise DocumentStoreError(f"Parent directory does not exist: {target.parent}")
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as e:
            raise DocumentStoreError(f"Failed to write {path}: {e}") from e

    def delete(self, path: str) -> None:
        try:
            self._abs(path).unlink()
        except OSError as e:
            raise DocumentStoreError(f"Failed to delete {path}: {e}") from e

    def rename(self, old_path: str, new_path: str) -> None:
        source = self._abs(old_path)
        target = self._abs(new_path)
        try:
            source.replace(target)
        except OSError as e:
            raise DocumentStoreError(f"Failed to rename {old_path} to {new_path}: {e}") from e

    def create_directory(self, path: str) -> None:
        try:
            self._abs(path).mkdir(exist_ok=True)
        except OSError as e:
            raise DocumentStoreError(f"Failed to create directory {path}: {e}") from e

    def watch(self, callback: Callable[[ChangeEvent], None]) -> Callable[[], None]:
        observer = Observer()
        observer.schedule(_EventHandler(self.base_dir.absolute(), callback), str(self.base_dir), recursive=True)
        observer.start()
        self._observers.append(observer)
        logger.info("Watching %s", self.base_dir)

        def stop() -> None:
            if observer in self._observers:
                self._observers.remove(observer)
                observer.stop()
                observer.join()

        return stop
