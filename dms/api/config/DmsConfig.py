"""Top-level DMS configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from ...constants import CONFIG_FILENAME
from ..docstore.DocumentStoreConfig import DocumentStoreConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .MirrorConfig import MirrorConfig
from .StoreConfig import StoreConfig
from .WatchConfig import WatchConfig


class DmsConfig(BaseModel):
    """Top-level configuration for DMS layers."""

    model_config = ConfigDict(extra="forbid")

    store: StoreConfig
    docstore: DocumentStoreConfig
    mirror: MirrorConfig = Field(default_factory=MirrorConfig)
    watch: WatchConfig = Field(default_factory=WatchConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @computed_field
    def path(self) -> Path:
        """Path to config file."""
        return self.get_config_path()

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get DMS home directory based on DMS_HOME or default to ~/.dms."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / CONFIG_FILENAME

    @classmethod
    def default(cls, base_dir: str) -> "DmsConfig":
        """Starter configuration mirroring into ``base_dir`` on the local filesystem."""
        return cls(
            store={"path": str(cls.get_home_dir() / "links.json")},
            docstore={"type": "filesystem", "base_dir": base_dir},
        )

    @classmethod
    def load(cls) -> "DmsConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert DmsConfig instance to a dictionary for serialization."""
        return {
            "store": self.store.model_dump(),
            "docstore": self.docstore.model_dump(),
            "mirror": self.mirror.model_dump(),
            "watch": self.watch.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
