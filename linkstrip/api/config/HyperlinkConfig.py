"""Hyperlink pass configuration."""

from __future__ import annotations

__all__ = ["HyperlinkConfig"]

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..policy.LinkType import LinkType
from .clean_entries import clean_entries


class HyperlinkConfig(BaseModel):
    """Hyperlink removal configuration model."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(True, description="Run the hyperlink pass")
    keep_text: bool = Field(True, description="Keep link text when a link is removed")
    whitelist: list[str] = Field(default_factory=list, description="URL substrings that protect a link")
    link_type: LinkType = Field(LinkType.BOTH, description="Remove internal, external or both kinds of link")
    blacklist_mode: bool = Field(False, description="Remove only links matching the blacklist")
    blacklist: list[str] = Field(default_factory=list, description="URL substrings selecting links to remove")

    @field_validator("whitelist", "blacklist")
    @classmethod
    def _clean(cls, v: list[str]) -> list[str]:
        return clean_entries(v)

    def scan_options(self) -> dict[str, Any]:
        """Keyword arguments for remove_hyperlinks."""
        return {
            "keep_text": self.keep_text,
            "whitelist": tuple(self.whitelist),
            "link_type": self.link_type,
            "blacklist_mode": self.blacklist_mode,
            "blacklist": tuple(self.blacklist),
        }
