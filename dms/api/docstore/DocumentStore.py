"""Document store public API."""

from collections.abc import Callable
from typing import Any

from ._AbstractBackend import _AbstractBackend
from .ChangeEvent import ChangeEvent
from .DocumentStoreConfig import DocumentStoreConfig


class DocumentStore(_AbstractBackend):
    """Facade for document store operations.

    Delegates to a concrete backend chosen by configuration and acts as a
    context manager so backends holding resources (observers) are released.
    """

    def __init__(self, docstore_config: DocumentStoreConfig):
        self.docstore_config = docstore_config
        self.type = docstore_config.type
        self._impl: _AbstractBackend | None = None

    def __enter__(self) -> "DocumentStore":
        from .DocumentStoreConfig import _BACKEND_REGISTRY

        backend_type = self.docstore_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Pattern: dms.api.docstore._<type>._Impl
        module = __import__(f"{_BACKEND_REGISTRY[backend_type]}._Impl", fromlist=[""])
        self._impl = module._Impl(self.docstore_config)
        if hasattr(self._impl, "__enter__"):
            self._impl.__enter__()  # type: ignore[attr-defined]
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._impl and hasattr(self._impl, "__exit__"):
            self._impl.__exit__(exc_type, exc_val, exc_tb)  # type: ignore[attr-defined]
        self._impl = None

    @property
    def impl(self) -> _AbstractBackend:
        if self._impl is None:
            raise RuntimeError("DocumentStore not initialized (use 'with DocumentStore(...)')")
        return self._impl

    @property
    def supports_rename(self) -> bool:  # type: ignore[override]
        return self.impl.supports_rename

    def exists(self, path: str) -> bool:
        return self.impl.exists(path)

    def read(self, path: str) -> str:
        return self.impl.read(path)

    def write(self, path: str, text: str) -> None:
        self.impl.write(path, text)

    def delete(self, path: str) -> None:
        self.impl.delete(path)

    def rename(self, old_path: str, new_path: str) -> None:
        self.impl.rename(old_path, new_path)

    def create_directory(self, path: str) -> None:
        self.impl.create_directory(path)

    def watch(self, callback: Callable[[ChangeEvent], None]) -> Callable[[], None]:
        return self.impl.watch(callback)
