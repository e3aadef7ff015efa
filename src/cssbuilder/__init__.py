"""Fluent builder for CSS selector strings."""

from pydantic import __version__ as _pydantic_version

# Selector documents rely on the Pydantic v2 API (TypeAdapter, model_validate).
if not _pydantic_version.startswith("2"):
    raise ImportError(
        "cssbuilder requires pydantic>=2.0; detected version %s" % _pydantic_version
    )

from .builder import (
    CssSelectorBuilder,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from .combined import Combinator, CombinedSelector
from .document import (
    CombinedSelectorDocument,
    SelectorDocument,
    SelectorPart,
    SimpleSelectorDocument,
    compile_document,
    dump_selector,
    load_selector,
    parse_document,
    to_document,
)
from .errors import DuplicateError, OrderError, SelectorError, UnknownCombinatorError
from .protocols import Stringifiable
from .settings import BuilderSettings, LoggingSettings, load_settings
from .simple import SimpleSelector
from .stages import PartKind, Stage

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "CssSelectorBuilder",
    "css_selector_builder",
    "SimpleSelector",
    "CombinedSelector",
    "Combinator",
    "Stringifiable",
    "Stage",
    "PartKind",
    "SelectorError",
    "DuplicateError",
    "OrderError",
    "UnknownCombinatorError",
    "SelectorPart",
    "SimpleSelectorDocument",
    "CombinedSelectorDocument",
    "SelectorDocument",
    "compile_document",
    "to_document",
    "parse_document",
    "load_selector",
    "dump_selector",
    "BuilderSettings",
    "LoggingSettings",
    "load_settings",
]
