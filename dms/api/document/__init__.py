"""Proxy document format."""

from .DocumentRenderer import DocumentRenderer
from .PartialRecord import PartialRecord

__all__ = ["DocumentRenderer", "PartialRecord"]
