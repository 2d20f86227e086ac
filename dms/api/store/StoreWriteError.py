"""Snapshot write failure."""


class StoreWriteError(RuntimeError):
    """The snapshot file could not be written; in-memory state was kept."""
