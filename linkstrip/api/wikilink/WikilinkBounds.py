"""WikilinkBounds model (UNO: single model)."""

import re

CLOSER = re.compile(r"\]\]")
# Content never crosses a line break
LINE_BREAK = re.compile("[\n\r\u2028\u2029]")


class WikilinkBounds:
    """Forward lookups for ``]]`` and line breaks in one text.

    Queries must come with non-decreasing positions, as a left-to-right scan
    makes them. A remembered hit is reused until the scan passes it, so each
    part of the text is searched at most once per pattern.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._found: dict[re.Pattern[str], int | None] = {CLOSER: -1, LINE_BREAK: -1}

    def _next(self, pattern: re.Pattern[str], pos: int) -> int | None:
        found = self._found[pattern]
        if found is not None and found < pos:
            match = pattern.search(self.text, pos)
            found = match.start() if match else None
            self._found[pattern] = found
        return found

    def next_close(self, pos: int) -> int | None:
        """Start of the first ``]]`` at or after pos."""
        return self._next(CLOSER, pos)

    def next_line_break(self, pos: int) -> int | None:
        """Index of the first line break at or after pos."""
        return self._next(LINE_BREAK, pos)
