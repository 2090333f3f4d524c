"""Top-level linkstrip configuration."""

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field, field_validator

from .HyperlinkConfig import HyperlinkConfig
from .LogConfig import LogConfig
from .WikilinkConfig import WikilinkConfig

PassName = Literal["hyperlinks", "wikilinks"]


class LinkstripConfig(BaseModel):
    """Top-level configuration for the link removal passes."""

    model_config = ConfigDict(extra="forbid")

    hyperlinks: HyperlinkConfig = Field(default_factory=HyperlinkConfig)
    wikilinks: WikilinkConfig = Field(default_factory=WikilinkConfig)
    log: LogConfig = Field(default_factory=LogConfig)
    order: list[PassName] = Field(
        default_factory=lambda: ["hyperlinks", "wikilinks"],
        description="Order in which enabled passes run",
    )

    @field_validator("order")
    @classmethod
    def _unique_order(cls, v: list[str]) -> list[str]:
        duplicates = sorted({name for name in v if v.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate pass names: {', '.join(duplicates)}")
        return v

    @computed_field
    def path(self) -> Path:
        """Path to config file."""
        return self.get_config_path()

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get linkstrip home directory based on LINKSTRIP_HOME or default to ~/.linkstrip."""
        home_env = os.environ.get("LINKSTRIP_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".linkstrip"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the linkstrip home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "LinkstripConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file cannot be read, holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

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
        """Convert to a JSON-serializable dictionary."""
        return {
            "hyperlinks": self.hyperlinks.model_dump(mode="json"),
            "wikilinks": self.wikilinks.model_dump(mode="json"),
            "log": self.log.model_dump(mode="json"),
            "order": list(self.order),
        }

    def save(self) -> None:
        """Save the configuration to its JSON file.

        Writes to a temp file and renames it over the target.

        Raises:
            RuntimeError: If the file cannot be written
        """
        path = self.get_config_path()
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
