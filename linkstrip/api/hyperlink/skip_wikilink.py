"""Wikilink guard for the hyperlink scanner (UNO: single function)."""


def skip_wikilink(text: str, pos: int) -> int | None:
    """Find the end of a ``[[...]]`` or ``![[...]]`` span opening at pos.

    Brackets are counted from a depth of 2 until the depth returns to zero.
    An opener that never balances runs to the end of the text.

    Args:
        text: Text being scanned
        pos: Candidate opener position

    Returns:
        Index just past the span, or None if no wikilink opens at pos
    """
    if text.startswith("[[", pos):
        cursor = pos + 2
    elif text.startswith("![[", pos):
        cursor = pos + 3
    else:
        return None

    depth = 2
    length = len(text)
    while cursor < length and depth > 0:
        char = text[cursor]
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        cursor += 1
    return cursor
