"""WikilinkSpan model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WikilinkSpan:
    """A matched ``[[content]]`` or ``![[content]]`` span."""

    start: int
    end: int
    content: str
    is_image: bool

    @property
    def path(self) -> str:
        return self.split_alias(self.content)[0]

    @property
    def alias(self) -> str | None:
        return self.split_alias(self.content)[1]

    @staticmethod
    def split_alias(content: str) -> tuple[str, str | None]:
        """Split path|alias on the first pipe.

        The alias is None when there is no pipe and "" for ``[[path|]]``.
        """
        if "|" in content:
            path, alias = content.split("|", 1)
            return path, alias
        return content, None
