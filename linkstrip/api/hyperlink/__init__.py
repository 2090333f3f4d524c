"""Hyperlink scanner: Markdown ``[text](url)`` and ``![alt](url)`` spans."""

from .BracketIndex import BracketIndex
from .HyperlinkSpan import HyperlinkSpan
from .match_hyperlink import match_hyperlink
from .remove_hyperlinks import remove_hyperlinks
from .skip_wikilink import skip_wikilink

__all__ = ["BracketIndex", "HyperlinkSpan", "match_hyperlink", "remove_hyperlinks", "skip_wikilink"]
