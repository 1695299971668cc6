"""Top-level sysmod configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from ..process.ProcessConfig import ProcessConfig
from .ContentsConfig import ContentsConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .RefreshConfig import RefreshConfig


class SysmodConfig(BaseModel):
    """Top-level configuration for sysmod layers."""

    model_config = ConfigDict(extra="forbid")

    contents: ContentsConfig
    process: ProcessConfig
    refresh: RefreshConfig
    log: LogConfig

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get sysmod home directory based on SYSMOD_HOME or default to ~/.sysmod."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file under the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def get_logfile_path(cls) -> Path:
        """Get path to the unified logfile under the home directory."""
        return cls.get_home_dir() / "logfile"

    @classmethod
    def load(cls) -> "SysmodConfig":
        """Load and validate config from file.

        All sections (contents, process, refresh, log) are required.

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
        """Convert SysmodConfig instance to a dictionary for serialization."""
        return {
            "contents": self.contents.model_dump(),
            "process": self.process.model_dump(),
            "refresh": self.refresh.model_dump(),
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
