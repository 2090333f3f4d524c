"""Case-insensitive exact matching for wikilink paths."""

from collections.abc import Iterable


def equals_any(value: str, entries: Iterable[str]) -> bool:
    """Return True if value equals any non-blank entry, ignoring case."""
    lowered = value.lower()
    return any(entry.lower() == lowered for entry in entries if entry.strip())
