"""Config API module."""

from .DmsConfig import DmsConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .MirrorConfig import MirrorConfig
from .StoreConfig import StoreConfig
from .WatchConfig import WatchConfig

__all__ = ["DmsConfig", "LogConfig", "MirrorConfig", "StoreConfig", "WatchConfig", "get_home_dir"]
