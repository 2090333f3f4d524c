"""Wikilink removal pass (UNO: single function)."""

from collections.abc import Iterable

from ..policy.WikilinkPolicy import WikilinkPolicy
from .match_wikilink import match_wikilink
from .WikilinkBounds import WikilinkBounds
from .WikilinkSpan import WikilinkSpan


def remove_wikilinks(
    text: str,
    keep_alias: bool = True,
    whitelist: Iterable[str] = (),
    blacklist_mode: bool = False,
    blacklist: Iterable[str] = (),
) -> str:
    """Strip Obsidian wikilinks and image embeds from text.

    ``[[path|alias]]`` becomes ``alias`` (or ``path``), ``![[embed]]`` becomes
    nothing. Markdown ``[text](url)`` links are left alone.

    Args:
        text: Markdown text
        keep_alias: Prefer the alias over the path when one is given
        whitelist: Paths protected from removal (normal mode)
        blacklist_mode: Remove only wikilinks whose path is blacklisted
        blacklist: Paths selecting wikilinks to remove (blacklist mode)

    Returns:
        The rewritten text
    """
    policy = WikilinkPolicy.build(keep_alias, whitelist, blacklist_mode, blacklist)

    bounds = WikilinkBounds(text)
    pieces: list[str] = []
    length = len(text)
    pos = 0
    while pos < length:
        span = match_wikilink(text, pos, bounds)
        if span is None:
            pieces.append(text[pos])
            pos += 1
            continue

        pieces.append(_replacement(text, span, policy))
        pos = span.end

    return "".join(pieces)


def _replacement(text: str, span: WikilinkSpan, policy: WikilinkPolicy) -> str:
    # Embeds are never protected by either list
    if span.is_image:
        return ""
    path, alias = WikilinkSpan.split_alias(span.content)
    if not policy.should_remove(path):
        return text[span.start : span.end]
    if policy.keep_alias and alias is not None:
        return alias
    return path
