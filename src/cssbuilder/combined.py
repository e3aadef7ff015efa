from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .protocols import Stringifiable


class Combinator(str, Enum):
    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"

    def __str__(self) -> str:
        return self.value


KNOWN_COMBINATORS = frozenset(c.value for c in Combinator)


@dataclass(frozen=True, eq=False)
class CombinedSelector:
    """Two selectors joined by a combinator token.

    Children are kept by reference, so a :class:`SimpleSelector` mutated after
    combining shows up in every tree that holds it.
    """

    left: Stringifiable
    combinator: str
    right: Stringifiable

    def stringify(self) -> str:
        # Exactly one space on each side, even for the " " combinator.
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


__all__ = ["Combinator", "CombinedSelector", "KNOWN_COMBINATORS"]
