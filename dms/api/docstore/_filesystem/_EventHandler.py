"""Watchdog event handler that translates filesystem events into ChangeEvents."""

from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from ..ChangeEvent import ChangeEvent


class _EventHandler(FileSystemEventHandler):
    """Forwards file (not directory) events under ``base_dir`` as relative ChangeEvents."""

    def __init__(self, base_dir: Path, callback: Callable[[ChangeEvent], None]) -> None:
        super().__init__()
        self.base_dir = base_dir
        self.callback = callback

    def _relative(self, raw: str | bytes) -> str | None:
        path = Path(raw.decode() if isinstance(raw, bytes) else raw)
        try:
            return path.absolute().relative_to(self.base_dir).as_posix()
        except ValueError:
            return None

    def on_created(self, event: FileSystemEvent) -> None:
        self.on_modified(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        rel = self._relative(event.src_path)
        if rel is not None:
            self.callback(ChangeEvent(kind="modify", path=rel))

    def on_deleted(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        rel = self._relative(event.src_path)
        if rel is not None:
            self.callback(ChangeEvent(kind="delete", path=rel))

    def on_moved(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        src = self._relative(event.src_path)
        dest = self._relative(event.dest_path)
        if src is not None and dest is not None:
            self.callback(ChangeEvent(kind="rename", path=dest, old_path=src))
        elif src is not None:
            # Moved out of the store
            self.callback(ChangeEvent(kind="delete", path=src))
        elif dest is not None:
            self.callback(ChangeEvent(kind="modify", path=dest))
