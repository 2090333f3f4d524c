"""Internal/external URL classification (UNO: single function)."""

import re

from .LinkType import LinkType

# RFC 3986 scheme followed by a colon
SCHEME_PATTERN = re.compile(r"^[a-z][a-z0-9+.-]*:", re.IGNORECASE)


def classify_url(url: str) -> LinkType:
    """Classify a hyperlink URL as internal or external.

    A URL starting with a scheme prefix (``https:``, ``mailto:``,
    ``obsidian:``...) is external. Relative paths, fragments and bare file
    names are internal. The URL is tested as written: leading spaces or an
    angle bracket make it internal.

    Args:
        url: Raw URL text found between the parentheses of a hyperlink

    Returns:
        LinkType.EXTERNAL or LinkType.INTERNAL
    """
    if SCHEME_PATTERN.match(url):
        return LinkType.EXTERNAL
    return LinkType.INTERNAL
