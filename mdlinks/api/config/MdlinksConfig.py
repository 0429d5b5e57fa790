"""Top-level mdlinks configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, computed_field

from ...utils.get_home_dir import get_home_dir
from ..target.OpenerConfig import OpenerConfig
from .LogConfig import LogConfig
from .ScanConfig import ScanConfig


class MdlinksConfig(BaseModel):
    """Top-level configuration: scanning, opening and logging."""

    model_config = ConfigDict(extra="forbid")

    scan: ScanConfig
    opener: OpenerConfig
    log: LogConfig

    @computed_field
    def path(self) -> Path:
        """Path to config file."""
        return self.get_config_path()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on MDLINKS_HOME or default to ~/.mdlinks."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "MdlinksConfig":
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

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: top level of {path} must be an object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "scan": self.scan.model_dump(),
            "opener": self.opener.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the configuration to its JSON file.

        Writes a temp file next to the target and renames it over the old file.
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
