"""Pull direction of synchronization."""

from .SelfWriteRegistry import SelfWriteRegistry
from .WatcherState import WatcherState
from .ChangeWatcher import ChangeWatcher  # noqa: I001

__all__ = ["ChangeWatcher", "SelfWriteRegistry", "WatcherState"]
