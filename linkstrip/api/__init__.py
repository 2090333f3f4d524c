"""API module for linkstrip.

Command functions (``cmd_*``) return a StageResult and are shared by the CLI;
the scanners under ``hyperlink`` and ``wikilink`` are plain functions.
"""

__all__ = []
