"""Shared utilities."""

from .get_package_version import get_package_version
from .logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger", "get_package_version"]
