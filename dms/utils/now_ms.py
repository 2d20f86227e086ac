"""Epoch-millisecond timestamp helper."""

import time


def now_ms() -> int:
    """Get current time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)
