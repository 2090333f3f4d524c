"""Wikilink pass configuration."""

from __future__ import annotations

__all__ = ["WikilinkConfig"]

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .clean_entries import clean_entries


class WikilinkConfig(BaseModel):
    """Wikilink removal configuration model."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(True, description="Run the wikilink pass")
    keep_alias: bool = Field(True, description="Keep the alias instead of the path when present")
    whitelist: list[str] = Field(default_factory=list, description="Paths protected from removal")
    blacklist_mode: bool = Field(False, description="Remove only wikilinks matching the blacklist")
    blacklist: list[str] = Field(default_factory=list, description="Paths selecting wikilinks to remove")

    @field_validator("whitelist", "blacklist")
    @classmethod
    def _clean(cls, v: list[str]) -> list[str]:
        return clean_entries(v)

    def scan_options(self) -> dict[str, Any]:
        """Keyword arguments for remove_wikilinks."""
        return {
            "keep_alias": self.keep_alias,
            "whitelist": tuple(self.whitelist),
            "blacklist_mode": self.blacklist_mode,
            "blacklist": tuple(self.blacklist),
        }
