"""linkstrip - remove Markdown hyperlinks and Obsidian wikilinks from text."""

from .api.hyperlink.remove_hyperlinks import remove_hyperlinks
from .api.policy.LinkType import LinkType
from .api.wikilink.remove_wikilinks import remove_wikilinks

__all__ = ["LinkType", "remove_hyperlinks", "remove_wikilinks"]
