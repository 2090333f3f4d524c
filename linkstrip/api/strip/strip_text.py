"""Run the configured link removal passes over a text."""

from ...utils.logger import get_logger
from ..config.LinkstripConfig import LinkstripConfig
from ..hyperlink.remove_hyperlinks import remove_hyperlinks
from ..wikilink.remove_wikilinks import remove_wikilinks
from .StripReport import StripReport

logger = get_logger("strip")


def strip_text(text: str, config: LinkstripConfig) -> StripReport:
    """Apply every enabled pass in config.order, each on the previous output.

    Args:
        text: Markdown text (a selection or a whole document)
        config: Loaded configuration

    Returns:
        StripReport with the new text and whether it differs from the input
    """
    result = text
    applied: list[str] = []
    for name in config.order:
        if name == "hyperlinks" and config.hyperlinks.enabled:
            result = remove_hyperlinks(result, **config.hyperlinks.scan_options())
        elif name == "wikilinks" and config.wikilinks.enabled:
            result = remove_wikilinks(result, **config.wikilinks.scan_options())
        else:
            continue
        applied.append(name)

    changed = result != text
    logger.debug("Applied passes %s (%d -> %d chars, changed=%s)", applied, len(text), len(result), changed)
    return StripReport(text=result, changed=changed, passes=tuple(applied))
