"""Wikilink matcher (UNO: single function)."""

from .WikilinkBounds import WikilinkBounds
from .WikilinkSpan import WikilinkSpan


def match_wikilink(text: str, pos: int, bounds: WikilinkBounds | None = None) -> WikilinkSpan | None:
    """Match a wikilink or image embed starting exactly at pos.

    The content ends at the first ``]]`` after the opener and may not contain
    a line break; brackets inside the content are plain characters.

    Args:
        text: Text being scanned
        pos: Position of ``[[`` or of the ``!`` in ``![[``
        bounds: Lookahead over text shared by a left-to-right scan; a fresh
            one is used when omitted

    Returns:
        WikilinkSpan, or None when no complete wikilink opens at pos
    """
    if text.startswith("![[", pos):
        is_image = True
        content_start = pos + 3
    elif text.startswith("[[", pos):
        is_image = False
        content_start = pos + 2
    else:
        return None

    if bounds is None:
        bounds = WikilinkBounds(text)

    close = bounds.next_close(content_start)
    if close is None:
        return None
    line_break = bounds.next_line_break(content_start)
    if line_break is not None and line_break < close:
        return None

    return WikilinkSpan(start=pos, end=close + 2, content=text[content_start:close], is_image=is_image)
