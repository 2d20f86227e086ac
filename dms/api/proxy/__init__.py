"""Push direction of synchronization."""

from .ProxySynchronizer import ProxySynchronizer

__all__ = ["ProxySynchronizer"]
