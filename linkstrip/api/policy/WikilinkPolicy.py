"""WikilinkPolicy model (UNO: single model)."""

from collections.abc import Iterable
from dataclasses import dataclass

from .equals_any import equals_any


@dataclass(frozen=True)
class WikilinkPolicy:
    """Removal policy for one wikilink pass."""

    keep_alias: bool = True
    whitelist: tuple[str, ...] = ()
    blacklist_mode: bool = False
    blacklist: tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        keep_alias: bool = True,
        whitelist: Iterable[str] = (),
        blacklist_mode: bool = False,
        blacklist: Iterable[str] = (),
    ) -> "WikilinkPolicy":
        """Build a policy from plain configuration values."""
        return cls(
            keep_alias=bool(keep_alias),
            whitelist=tuple(whitelist),
            blacklist_mode=bool(blacklist_mode),
            blacklist=tuple(blacklist),
        )

    def should_remove(self, path: str) -> bool:
        """Decide whether a (non-embed) wikilink to path is removed.

        Only the path before the alias separator is matched.
        """
        if self.blacklist_mode:
            return equals_any(path, self.blacklist)
        return not equals_any(path, self.whitelist)
