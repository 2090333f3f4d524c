"""Normalize whitelist/blacklist entries from configuration."""


def clean_entries(entries: list[str]) -> list[str]:
    """Strip surrounding whitespace and drop blank entries, keeping order."""
    return [entry.strip() for entry in entries if entry.strip()]
