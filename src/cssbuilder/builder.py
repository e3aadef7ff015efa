"""Stateless entry points for building selectors.

Each seed function returns a fresh :class:`SimpleSelector` with one part
already applied; further parts are chained on the returned object::

    >>> element("div").id("main").class_("container").stringify()
    'div#main.container'
    >>> combine(element("ul"), ">", element("li")).stringify()
    'ul > li'
"""

from __future__ import annotations

from .combined import CombinedSelector
from .protocols import Stringifiable
from .simple import SimpleSelector


def element(value: str) -> SimpleSelector:
    return SimpleSelector().element(value)


def id(value: str) -> SimpleSelector:  # noqa: A001 - mirrors the part name
    return SimpleSelector().id(value)


def class_(value: str) -> SimpleSelector:
    return SimpleSelector().class_(value)


def attr(value: str) -> SimpleSelector:
    return SimpleSelector().attr(value)


def pseudo_class(value: str) -> SimpleSelector:
    return SimpleSelector().pseudo_class(value)


def pseudo_element(value: str) -> SimpleSelector:
    return SimpleSelector().pseudo_element(value)


def combine(left: Stringifiable, combinator: str, right: Stringifiable) -> CombinedSelector:
    """Join two selectors; the combinator token is not validated."""

    return CombinedSelector(left, combinator, right)


class CssSelectorBuilder:
    """Namespace object exposing the seed functions as methods."""

    element = staticmethod(element)
    id = staticmethod(id)
    class_ = staticmethod(class_)
    attr = staticmethod(attr)
    pseudo_class = staticmethod(pseudo_class)
    pseudo_element = staticmethod(pseudo_element)
    combine = staticmethod(combine)


css_selector_builder = CssSelectorBuilder()


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
]
