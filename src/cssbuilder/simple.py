"""Simple (compound) CSS selector accumulator.

A :class:`SimpleSelector` collects the parts of one compound selector::

    element#id.class[attr]:pseudo-class::pseudo-element

Parts must be added in that order. Element, id and pseudo-element may be set
only once; classes, attributes and pseudo-classes can repeat. Each part method
returns the selector itself so calls can be chained.
"""

from __future__ import annotations

from typing import FrozenSet, List, Optional

from .errors import DuplicateError, OrderError
from .stages import SINGLETON_STAGES, Stage


class SimpleSelector:
    def __init__(self) -> None:
        self.element_part: Optional[str] = None
        self.id_part: Optional[str] = None
        self.class_parts: List[str] = []
        self.attr_parts: List[str] = []
        self.pseudo_class_parts: List[str] = []
        self.pseudo_element_part: Optional[str] = None

    def stages(self) -> FrozenSet[Stage]:
        """Return the stages that currently hold a value."""

        filled = {
            Stage.ELEMENT: bool(self.element_part),
            Stage.ID: bool(self.id_part),
            Stage.CLASS: bool(self.class_parts),
            Stage.ATTRIBUTE: bool(self.attr_parts),
            Stage.PSEUDO_CLASS: bool(self.pseudo_class_parts),
            Stage.PSEUDO_ELEMENT: bool(self.pseudo_element_part),
        }
        return frozenset(stage for stage, present in filled.items() if present)

    def is_empty(self) -> bool:
        return not self.stages()

    def _check(self, stage: Stage) -> None:
        # Re-evaluated from field state on every call: repeatable stages
        # must not freeze the selector.
        present = self.stages()
        if stage in SINGLETON_STAGES and stage in present:
            raise DuplicateError(stage)
        later = [s for s in present if s > stage]
        if later:
            raise OrderError(stage, later)

    def element(self, value: str) -> "SimpleSelector":
        self._check(Stage.ELEMENT)
        self.element_part = value
        return self

    def id(self, value: str) -> "SimpleSelector":
        self._check(Stage.ID)
        self.id_part = value
        return self

    def class_(self, value: str) -> "SimpleSelector":
        self._check(Stage.CLASS)
        self.class_parts.append(value)
        return self

    def attr(self, value: str) -> "SimpleSelector":
        self._check(Stage.ATTRIBUTE)
        self.attr_parts.append(value)
        return self

    def pseudo_class(self, value: str) -> "SimpleSelector":
        self._check(Stage.PSEUDO_CLASS)
        self.pseudo_class_parts.append(value)
        return self

    def pseudo_element(self, value: str) -> "SimpleSelector":
        self._check(Stage.PSEUDO_ELEMENT)
        self.pseudo_element_part = value
        return self

    def stringify(self) -> str:
        out: List[str] = []
        if self.element_part:
            out.append(self.element_part)
        if self.id_part:
            out.append(f"#{self.id_part}")
        out.extend(f".{v}" for v in self.class_parts)
        out.extend(f"[{v}]" for v in self.attr_parts)
        out.extend(f":{v}" for v in self.pseudo_class_parts)
        if self.pseudo_element_part:
            out.append(f"::{self.pseudo_element_part}")
        return "".join(out)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SimpleSelector({self.stringify()!r})"


__all__ = ["SimpleSelector"]
