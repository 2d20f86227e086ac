"""Shared constants for DMS dot-directories and artefact locations."""

DMS_HOME_EXT = ".dms"  # user-level state/config directory suffix

CONFIG_FILENAME = "config.json"

LOG_FILENAME = "dms.log"
