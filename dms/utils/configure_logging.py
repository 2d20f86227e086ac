"""Unified logging setup for DMS."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import DMS_HOME_EXT, LOG_FILENAME

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(dms_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified DMS logging.

    Args:
        dms_home: Path to DMS home directory. If None, derived from environment.
        level: Logging level name for the ``dms`` logger tree.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if dms_home is None:
        env_home = os.environ.get("DMS_HOME")
        dms_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / DMS_HOME_EXT

    dms_home.mkdir(parents=True, exist_ok=True)
    log_file = dms_home / LOG_FILENAME

    root_logger = logging.getLogger("dms")
    # "WARN" is accepted in config files for parity with log prefixes
    root_logger.setLevel("WARNING" if level == "WARN" else level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
