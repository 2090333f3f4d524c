"""Hyperlink removal pass (UNO: single function)."""

from collections.abc import Iterable

from ..policy.HyperlinkPolicy import HyperlinkPolicy
from ..policy.LinkType import LinkType
from .BracketIndex import BracketIndex
from .HyperlinkSpan import HyperlinkSpan
from .match_hyperlink import match_hyperlink
from .skip_wikilink import skip_wikilink


def remove_hyperlinks(
    text: str,
    keep_text: bool = True,
    whitelist: Iterable[str] = (),
    link_type: LinkType | str = LinkType.BOTH,
    blacklist_mode: bool = False,
    blacklist: Iterable[str] = (),
) -> str:
    """Strip Markdown links and images from text.

    Wikilinks and image embeds are copied through untouched. Syntax that does
    not form a complete link is kept as literal text.

    Args:
        text: Markdown text
        keep_text: Replace a removed link with its text (images always vanish)
        whitelist: URL substrings that protect a link (normal mode)
        link_type: Only remove "internal" or "external" links, or "both"
        blacklist_mode: Remove only links whose URL matches the blacklist
        blacklist: URL substrings selecting links to remove (blacklist mode)

    Returns:
        The rewritten text

    Raises:
        ValueError: If link_type is not a valid LinkType
    """
    policy = HyperlinkPolicy.build(keep_text, whitelist, link_type, blacklist_mode, blacklist)

    index = BracketIndex.build(text)
    pieces: list[str] = []
    length = len(text)
    pos = 0
    while pos < length:
        guard_end = skip_wikilink(text, pos)
        if guard_end is not None:
            pieces.append(text[pos:guard_end])
            pos = guard_end
            continue

        span = match_hyperlink(text, pos, index)
        if span is None:
            pieces.append(text[pos])
            pos += 1
            continue

        pieces.append(_replacement(text, span, policy))
        pos = span.end

    return "".join(pieces)


def _replacement(text: str, span: HyperlinkSpan, policy: HyperlinkPolicy) -> str:
    if not policy.should_remove(span.url):
        return text[span.start : span.end]
    if span.is_image or not policy.keep_text:
        return ""
    return span.link_text
