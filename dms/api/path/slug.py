"""Document-name slug for a record title."""

import re
from urllib.parse import unquote

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def slug(title: str) -> str:
    """Derive a filename-safe document name from ``title``.

    Percent-encoding is decoded first, every run of characters outside
    ``[A-Za-z0-9]`` becomes a single ``_``, and leading/trailing ``_`` are trimmed.
    An empty result becomes ``"Untitled"``.

    Examples:
        >>> slug("Quarterly Report (draft)")
        'Quarterly_Report_draft'
        >>> slug("my%20notes")
        'my_notes'
    """
    decoded = unquote(title or "")
    return _NON_ALNUM.sub("_", decoded).strip("_") or "Untitled"
