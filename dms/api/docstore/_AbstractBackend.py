"""Abstract base class for document store backends."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from .ChangeEvent import ChangeEvent


class _AbstractBackend(ABC):
    """Capability interface consumed by the sync engine.

    All paths are posix-style strings relative to the store root.
    """

    supports_rename: bool = True

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def read(self, path: str) -> str:
        pass

    @abstractmethod
    def write(self, path: str, text: str) -> None:
        """Create or overwrite ``path``."""
        pass

    @abstractmethod
    def delete(self, path: str) -> None:
        pass

    @abstractmethod
    def rename(self, old_path: str, new_path: str) -> None:
        pass

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """Create one directory; an existing directory is not an error."""
        pass

    @abstractmethod
    def watch(self, callback: Callable[[ChangeEvent], None]) -> Callable[[], None]:
        """Subscribe to change notifications; returns a function that unsubscribes."""
        pass
