"""Link removal policy: classification and whitelist/blacklist matching."""

from .classify_url import classify_url
from .contains_any import contains_any
from .equals_any import equals_any
from .HyperlinkPolicy import HyperlinkPolicy
from .LinkType import LinkType
from .WikilinkPolicy import WikilinkPolicy

__all__ = [
    "HyperlinkPolicy",
    "LinkType",
    "WikilinkPolicy",
    "classify_url",
    "contains_any",
    "equals_any",
]
