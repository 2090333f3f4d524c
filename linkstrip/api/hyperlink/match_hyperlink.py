"""Hyperlink matcher (UNO: single function)."""

from .BracketIndex import BracketIndex
from .HyperlinkSpan import HyperlinkSpan


def match_hyperlink(text: str, pos: int, index: BracketIndex | None = None) -> HyperlinkSpan | None:
    """Match a Markdown link or image starting exactly at pos.

    The link text is closed by the bracket that brings the nesting depth back
    to zero; a bracket preceded by a backslash does not count. The URL is
    closed by the parenthesis that balances the opening one, so URLs such as
    ``.../Down_(OK_Go_song)`` stay intact. Parentheses are never escaped.

    Args:
        text: Text being scanned
        pos: Position of ``[`` or of the ``!`` in ``![``
        index: BracketIndex of text; built here when omitted, so a scan over
            the whole text should build it once and pass it in

    Returns:
        HyperlinkSpan for a complete link, or None when the syntax at pos is
        not a (terminated) link
    """
    length = len(text)
    is_image = text.startswith("![", pos)
    bracket_pos = pos + 1 if is_image else pos
    if bracket_pos >= length or text[bracket_pos] != "[":
        return None

    if index is None:
        index = BracketIndex.build(text)

    close = index.closing_bracket(bracket_pos)
    if close is None:
        return None

    paren_pos = close + 1
    if paren_pos >= length or text[paren_pos] != "(":
        return None

    url_close = index.closing_paren(paren_pos)
    if url_close is None:
        return None

    return HyperlinkSpan(
        start=pos,
        end=url_close + 1,
        link_text=text[bracket_pos + 1 : close],
        url=text[paren_pos + 1 : url_close],
        is_image=is_image,
    )
