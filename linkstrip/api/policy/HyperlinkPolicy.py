"""HyperlinkPolicy model (UNO: single model)."""

from collections.abc import Iterable
from dataclasses import dataclass

from .classify_url import classify_url
from .contains_any import contains_any
from .LinkType import LinkType


@dataclass(frozen=True)
class HyperlinkPolicy:
    """Removal policy for one hyperlink pass."""

    keep_text: bool = True
    whitelist: tuple[str, ...] = ()
    link_type: LinkType = LinkType.BOTH
    blacklist_mode: bool = False
    blacklist: tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        keep_text: bool = True,
        whitelist: Iterable[str] = (),
        link_type: LinkType | str = LinkType.BOTH,
        blacklist_mode: bool = False,
        blacklist: Iterable[str] = (),
    ) -> "HyperlinkPolicy":
        """Build a policy from plain configuration values.

        Raises:
            ValueError: If link_type is not one of both, internal, external
        """
        return cls(
            keep_text=bool(keep_text),
            whitelist=tuple(whitelist),
            link_type=LinkType(link_type),
            blacklist_mode=bool(blacklist_mode),
            blacklist=tuple(blacklist),
        )

    def should_remove(self, url: str) -> bool:
        """Decide whether a hyperlink pointing at url is removed."""
        if self.blacklist_mode:
            # link_type does not apply in blacklist mode
            return contains_any(url, self.blacklist)
        if contains_any(url, self.whitelist):
            return False
        if self.link_type is LinkType.BOTH:
            return True
        return classify_url(url) is self.link_type
