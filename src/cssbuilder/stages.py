from __future__ import annotations

from enum import Enum, IntEnum


class Stage(IntEnum):
    """Position of a part kind in the required CSS ordering."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


class PartKind(str, Enum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTR = "attr"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"

    @property
    def stage(self) -> Stage:
        return _KIND_STAGES[self]


_KIND_STAGES = {
    PartKind.ELEMENT: Stage.ELEMENT,
    PartKind.ID: Stage.ID,
    PartKind.CLASS: Stage.CLASS,
    PartKind.ATTR: Stage.ATTRIBUTE,
    PartKind.PSEUDO_CLASS: Stage.PSEUDO_CLASS,
    PartKind.PSEUDO_ELEMENT: Stage.PSEUDO_ELEMENT,
}

# Stages that may appear only once per selector.
SINGLETON_STAGES = frozenset({Stage.ELEMENT, Stage.ID, Stage.PSEUDO_ELEMENT})


__all__ = ["Stage", "PartKind", "SINGLETON_STAGES"]
