"""Declarative selector documents.

A document is a JSON-friendly description of a selector tree::

    {"left": {"parts": [{"kind": "element", "value": "ul"}]},
     "combinator": ">",
     "right": {"parts": [{"kind": "element", "value": "li"},
                         {"kind": "pseudo_class", "value": "first-child"}]}}

Compiling replays the parts through the fluent :class:`SimpleSelector` API in
the listed order, so the ordering and uniqueness rules apply unchanged.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .builder import combine
from .combined import KNOWN_COMBINATORS, CombinedSelector
from .errors import UnknownCombinatorError
from .protocols import Stringifiable
from .settings import BuilderSettings
from .simple import SimpleSelector
from .stages import PartKind

logger = logging.getLogger(__name__)


class SelectorPart(BaseModel):
    kind: PartKind
    value: str

    model_config = ConfigDict(extra="forbid")


class SimpleSelectorDocument(BaseModel):
    parts: List[SelectorPart] = Field(min_length=1)

    model_config = ConfigDict(extra="forbid")


class CombinedSelectorDocument(BaseModel):
    left: "SelectorDocument"
    combinator: str
    right: "SelectorDocument"

    model_config = ConfigDict(extra="forbid")


SelectorDocument = Union[CombinedSelectorDocument, SimpleSelectorDocument]

CombinedSelectorDocument.model_rebuild()

_DOCUMENT_ADAPTER: TypeAdapter[SelectorDocument] = TypeAdapter(SelectorDocument)

_APPLY: Dict[PartKind, Callable[[SimpleSelector, str], SimpleSelector]] = {
    PartKind.ELEMENT: SimpleSelector.element,
    PartKind.ID: SimpleSelector.id,
    PartKind.CLASS: SimpleSelector.class_,
    PartKind.ATTR: SimpleSelector.attr,
    PartKind.PSEUDO_CLASS: SimpleSelector.pseudo_class,
    PartKind.PSEUDO_ELEMENT: SimpleSelector.pseudo_element,
}


def _compile_simple(doc: SimpleSelectorDocument) -> SimpleSelector:
    selector = SimpleSelector()
    for part in doc.parts:
        _APPLY[part.kind](selector, part.value)
    return selector


def _check_combinator(combinator: str, settings: BuilderSettings) -> None:
    if combinator in KNOWN_COMBINATORS:
        return
    if settings.strict_combinators:
        raise UnknownCombinatorError(combinator, KNOWN_COMBINATORS)
    logger.warning("Accepting non-CSS combinator %r", combinator)


def compile_document(
    doc: SelectorDocument, *, settings: Optional[BuilderSettings] = None
) -> Stringifiable:
    """Build a live selector tree from a validated document."""

    settings = settings or BuilderSettings()
    if isinstance(doc, SimpleSelectorDocument):
        selector = _compile_simple(doc)
        rendered = selector.stringify()
        logger.debug("Compiled simple selector %r", rendered, extra={"selector": rendered})
        return selector
    _check_combinator(doc.combinator, settings)
    left = compile_document(doc.left, settings=settings)
    right = compile_document(doc.right, settings=settings)
    return combine(left, doc.combinator, right)


def _simple_parts(selector: SimpleSelector) -> List[SelectorPart]:
    parts: List[SelectorPart] = []
    if selector.element_part:
        parts.append(SelectorPart(kind=PartKind.ELEMENT, value=selector.element_part))
    if selector.id_part:
        parts.append(SelectorPart(kind=PartKind.ID, value=selector.id_part))
    parts.extend(SelectorPart(kind=PartKind.CLASS, value=v) for v in selector.class_parts)
    parts.extend(SelectorPart(kind=PartKind.ATTR, value=v) for v in selector.attr_parts)
    parts.extend(
        SelectorPart(kind=PartKind.PSEUDO_CLASS, value=v) for v in selector.pseudo_class_parts
    )
    if selector.pseudo_element_part:
        parts.append(
            SelectorPart(kind=PartKind.PSEUDO_ELEMENT, value=selector.pseudo_element_part)
        )
    return parts


def to_document(node: Stringifiable) -> SelectorDocument:
    """Describe a selector tree as a document.

    Simple selectors list their parts in stage order.
    """

    if isinstance(node, SimpleSelector):
        if node.is_empty():
            raise ValueError("Cannot export an empty selector")
        return SimpleSelectorDocument(parts=_simple_parts(node))
    if isinstance(node, CombinedSelector):
        return CombinedSelectorDocument(
            left=to_document(node.left),
            combinator=str(node.combinator),
            right=to_document(node.right),
        )
    raise TypeError(f"Cannot export selector node of type {type(node).__name__}")


def parse_document(text: str | bytes) -> SelectorDocument:
    return _DOCUMENT_ADAPTER.validate_json(text)


def load_selector(
    text: str | bytes, *, settings: Optional[BuilderSettings] = None
) -> Stringifiable:
    return compile_document(parse_document(text), settings=settings)


def dump_selector(node: Stringifiable, *, indent: Optional[int] = None) -> str:
    return _DOCUMENT_ADAPTER.dump_json(to_document(node), indent=indent).decode("utf-8")


__all__ = [
    "SelectorPart",
    "SimpleSelectorDocument",
    "CombinedSelectorDocument",
    "SelectorDocument",
    "compile_document",
    "to_document",
    "parse_document",
    "load_selector",
    "dump_selector",
]
