"""Sanitize an external path for display and for link syntax."""

import re

from .RootQualifier import RootQualifier

_DUPLICATE_SEPARATORS = re.compile(r"(^|[^:/])/{2,}")


def sanitize_external_path(path: str, root_qualifier: RootQualifier | None = None) -> str:
    """Normalize separators and escape characters that break document links.

    Backslashes become ``/`` and runs of ``/`` collapse to one, except the ``//``
    that follows a scheme or drive colon. Only ``%``, whitespace, ``(`` and ``)``
    are percent-encoded, ``%`` first so existing escapes are not double-read.

    Args:
        path: URL or local path as entered by the user.
        root_qualifier: Optional qualifier applied to local paths before escaping.
    """
    normalized = path.replace("\\", "/")
    # A leading "//" is a UNC share, keep it
    prefix = "//" if normalized.startswith("//") else ""
    body = normalized[len(prefix) :].lstrip("/") if prefix else normalized
    normalized = prefix + _DUPLICATE_SEPARATORS.sub(r"\1/", body)

    if root_qualifier is not None and "://" not in normalized:
        normalized = root_qualifier.qualify(normalized)

    normalized = normalized.replace("%", "%25")
    normalized = re.sub(r"\s", "%20", normalized)
    return normalized.replace("(", "%28").replace(")", "%29")
