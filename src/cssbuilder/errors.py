from __future__ import annotations

from typing import Iterable, Tuple

from .stages import Stage

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base class for selector building errors."""


class DuplicateError(SelectorError):
    def __init__(self, stage: Stage):
        super().__init__(DUPLICATE_MESSAGE)
        self.stage = stage


class OrderError(SelectorError):
    def __init__(self, stage: Stage, blocking: Iterable[Stage]):
        super().__init__(ORDER_MESSAGE)
        self.stage = stage
        self.blocking: Tuple[Stage, ...] = tuple(sorted(blocking))


class UnknownCombinatorError(SelectorError):
    def __init__(self, combinator: str, known: Iterable[str]):
        super().__init__(
            f"Unknown combinator {combinator!r}; known combinators: {sorted(known)}"
        )
        self.combinator = combinator


__all__ = [
    "DUPLICATE_MESSAGE",
    "ORDER_MESSAGE",
    "SelectorError",
    "DuplicateError",
    "OrderError",
    "UnknownCombinatorError",
]
