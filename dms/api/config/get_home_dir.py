"""Get DMS home directory path or path under it."""

import os
from pathlib import Path

from ...constants import DMS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get DMS home directory path or path under it.

    Checks DMS_HOME environment variable first, defaults to ~/.dms if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.dms")
        >>> get_home_dir("links.json")
        Path("/Users/user/.dms/links.json")
    """
    dms_home_env = os.environ.get("DMS_HOME")
    if dms_home_env:
        dms_home = Path(dms_home_env).expanduser().resolve()
    else:
        home_env = os.environ.get("HOME")
        dms_home = Path(home_env) / DMS_HOME_EXT if home_env else Path.home() / DMS_HOME_EXT

    return dms_home / Path(*parts) if parts else dms_home
