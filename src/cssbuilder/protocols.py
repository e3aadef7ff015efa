from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Stringifiable(Protocol):
    def stringify(self) -> str: ...


__all__ = ["Stringifiable"]
