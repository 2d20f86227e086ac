"""Resolve an external path to something a system launcher can open."""

from .is_url import is_url
from .RootQualifier import RootQualifier
from .sanitize_external_path import sanitize_external_path


def to_open_uri(path: str, root_qualifier: RootQualifier | None = None) -> str:
    """URLs pass through unchanged; local paths become ``file://`` URIs."""
    if is_url(path):
        return path.strip()
    sanitized = sanitize_external_path(path, root_qualifier)
    if sanitized.startswith("file://"):
        return sanitized
    if not sanitized.startswith("/"):
        sanitized = "/" + sanitized
    return f"file://{sanitized}"
