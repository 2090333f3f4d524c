"""StripReport model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StripReport:
    """Outcome of running the configured passes over one text."""

    text: str
    changed: bool
    passes: tuple[str, ...]
