"""Configuration models and commands."""

from .HyperlinkConfig import HyperlinkConfig
from .LinkstripConfig import LinkstripConfig
from .LogConfig import LogConfig
from .WikilinkConfig import WikilinkConfig

__all__ = ["HyperlinkConfig", "LinkstripConfig", "LogConfig", "WikilinkConfig"]
