"""Scheme sniffing for external paths."""


def is_url(path: str) -> bool:
    """True for ``http://`` and ``https://`` locations, False for everything local."""
    lowered = path.strip().lower()
    return lowered.startswith("http://") or lowered.startswith("https://")
