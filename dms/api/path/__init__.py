"""Path helpers: document slugs and external path sanitizing."""

from .is_url import is_url
from .RootQualifier import DriveRootQualifier, PosixRootQualifier, RootQualifier, default_root_qualifier
from .sanitize_external_path import sanitize_external_path
from .slug import slug
from .to_open_uri import to_open_uri

__all__ = [
    "DriveRootQualifier",
    "PosixRootQualifier",
    "RootQualifier",
    "default_root_qualifier",
    "is_url",
    "sanitize_external_path",
    "slug",
    "to_open_uri",
]
