"""Pluggable root qualification for rootless local paths."""

import platform
import re
from abc import ABC, abstractmethod

_HAS_DRIVE = re.compile(r"^[A-Za-z]:")


class RootQualifier(ABC):
    """Adds a host-specific root to local absolute paths that lack one."""

    @abstractmethod
    def qualify(self, path: str) -> str:
        """Return ``path`` (forward slashes) with a root qualifier where one is missing."""


class PosixRootQualifier(RootQualifier):
    """POSIX hosts: ``/x`` is already fully rooted."""

    def qualify(self, path: str) -> str:
        return path


class DriveRootQualifier(RootQualifier):
    """Drive-letter hosts: ``/x`` becomes ``<drive>/x``."""

    def __init__(self, drive: str = "C:"):
        drive = drive.strip().rstrip("/\\")
        if not drive.endswith(":"):
            drive += ":"
        self.drive = drive

    def qualify(self, path: str) -> str:
        # UNC shares (//host/share) and already-qualified paths are left alone
        if path.startswith("/") and not path.startswith("//") and not _HAS_DRIVE.match(path):
            return f"{self.drive}{path}"
        return path


def default_root_qualifier(drive: str | None = None) -> RootQualifier:
    """Pick the qualifier for this host, honouring an explicit ``drive`` override."""
    if drive:
        return DriveRootQualifier(drive)
    if platform.system().lower() == "windows":
        return DriveRootQualifier("C:")
    return PosixRootQualifier()
