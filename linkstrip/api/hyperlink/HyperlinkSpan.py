"""HyperlinkSpan model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HyperlinkSpan:
    """A matched ``[text](url)`` or ``![alt](url)`` span.

    ``start``/``end`` delimit the span as a half-open range of the scanned text.
    """

    start: int
    end: int
    link_text: str
    url: str
    is_image: bool
