"""Change watcher states."""

from enum import Enum


class WatcherState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    HANDLING = "handling"
