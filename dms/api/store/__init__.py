"""Link store: the authoritative record collection."""

from .LinkStore import LinkStore
from .LinkStoreSnapshot import LinkStoreSnapshot
from .merge_records import merge_records
from .StoreWriteError import StoreWriteError

__all__ = ["LinkStore", "LinkStoreSnapshot", "StoreWriteError", "merge_records"]
