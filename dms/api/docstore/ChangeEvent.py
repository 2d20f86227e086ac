"""Document-store change notification (UNO: single model)."""

from dataclasses import dataclass
from typing import Literal

ChangeKind = Literal["modify", "rename", "delete"]


@dataclass(frozen=True)
class ChangeEvent:
    """One change under the document store root.

    Paths are posix-style and relative to the store root. ``old_path`` is set
    only for renames.
    """

    kind: ChangeKind
    path: str
    old_path: str | None = None
