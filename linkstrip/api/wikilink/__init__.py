"""Wikilink scanner: Obsidian ``[[path|alias]]`` and ``![[embed]]`` spans."""

from .match_wikilink import match_wikilink
from .remove_wikilinks import remove_wikilinks
from .WikilinkBounds import WikilinkBounds
from .WikilinkSpan import WikilinkSpan

__all__ = ["WikilinkBounds", "WikilinkSpan", "match_wikilink", "remove_wikilinks"]
