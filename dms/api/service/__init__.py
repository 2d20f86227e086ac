"""Sync service facade."""

from .CollectingListener import CollectingListener
from .open_service import open_service
from .SyncListener import NullListener, SyncListener
from .SyncService import SyncService
from .TagRegistry import TagRegistry

__all__ = ["CollectingListener", "NullListener", "SyncListener", "SyncService", "TagRegistry", "open_service"]
