"""Per-invocation pass toggles (UNO: single function)."""

from ..config.LinkstripConfig import LinkstripConfig


def apply_overrides(
    config: LinkstripConfig,
    hyperlinks: bool | None = None,
    wikilinks: bool | None = None,
) -> LinkstripConfig:
    """Return a copy of config with the given passes switched on or off.

    None leaves the configured value in place. The input is not modified.
    """
    update = {}
    if hyperlinks is not None:
        update["hyperlinks"] = config.hyperlinks.model_copy(update={"enabled": hyperlinks})
    if wikilinks is not None:
        update["wikilinks"] = config.wikilinks.model_copy(update={"enabled": wikilinks})
    if not update:
        return config
    return config.model_copy(update=update)
