"""Document store capability: the host's document primitives."""

from .ChangeEvent import ChangeEvent
from .DocumentStore import DocumentStore
from .DocumentStoreConfig import DocumentStoreConfig
from .DocumentStoreError import DocumentStoreError

__all__ = ["ChangeEvent", "DocumentStore", "DocumentStoreConfig", "DocumentStoreError"]
