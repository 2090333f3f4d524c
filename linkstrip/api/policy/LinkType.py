"""LinkType enum for hyperlink removal filtering."""

from enum import Enum


class LinkType(str, Enum):
    BOTH = "both"
    INTERNAL = "internal"
    EXTERNAL = "external"
