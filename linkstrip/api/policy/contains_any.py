"""Case-insensitive substring matching for hyperlink URLs."""

from collections.abc import Iterable


def contains_any(value: str, entries: Iterable[str]) -> bool:
    """Return True if any non-blank entry occurs in value, ignoring case."""
    lowered = value.lower()
    return any(entry.lower() in lowered for entry in entries if entry.strip())
