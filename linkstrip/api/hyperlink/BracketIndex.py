"""BracketIndex model (UNO: single model)."""

from dataclasses import dataclass


def _next_lower(text: str, opener: str, closer: str, escapable: bool) -> list[int | None]:
    """Map every prefix length k to the next prefix length whose nesting depth is one lower.

    balance[k] is the depth after text[:k]. An opener at pos is closed by the
    character just before next_lower[pos + 1], which is exactly where a
    counter started at 1 after pos first drops to 0.
    """
    balances = [0]
    depth = 0
    for i, char in enumerate(text):
        if char == opener or char == closer:
            if not (escapable and i and text[i - 1] == "\\"):
                depth += 1 if char == opener else -1
        balances.append(depth)

    result: list[int | None] = [None] * len(balances)
    last_seen: dict[int, int] = {}
    for k in range(len(balances) - 1, -1, -1):
        result[k] = last_seen.get(balances[k] - 1)
        last_seen[balances[k]] = k
    return result


@dataclass(frozen=True)
class BracketIndex:
    """Closing positions for ``[`` and ``(`` openers of one text, built in O(n).

    Brackets preceded by a backslash do not nest; parentheses always do.
    """

    brackets: list[int | None]
    parens: list[int | None]

    @classmethod
    def build(cls, text: str) -> "BracketIndex":
        return cls(
            brackets=_next_lower(text, "[", "]", escapable=True),
            parens=_next_lower(text, "(", ")", escapable=False),
        )

    def closing_bracket(self, pos: int) -> int | None:
        """Index of the ``]`` closing the ``[`` at pos, or None."""
        return self._closing(self.brackets, pos)

    def closing_paren(self, pos: int) -> int | None:
        """Index of the ``)`` closing the ``(`` at pos, or None."""
        return self._closing(self.parens, pos)

    @staticmethod
    def _closing(table: list[int | None], pos: int) -> int | None:
        if pos + 1 >= len(table):
            return None
        end = table[pos + 1]
        return None if end is None else end - 1
