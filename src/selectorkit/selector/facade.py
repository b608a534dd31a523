"""Facade: one entry point per fragment kind, each starting a fresh builder."""

from __future__ import annotations

from selectorkit.selector.builder import SelectorBuilder
from selectorkit.selector.compound import CompoundSelector, Stringifiable, combine

__all__ = ["SelectorFacade", "css_selector_builder"]


class SelectorFacade:
    """Stateless entry point for building selectors.

    Usage::

        builder = css_selector_builder
        builder.id("main").class_("container").stringify()
        # '#main.container'

        builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).stringify()
        # 'div#main + table#data'
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, selector1: Stringifiable, combinator: str, selector2: Stringifiable
    ) -> CompoundSelector:
        return combine(selector1, combinator, selector2)


setattr(SelectorFacade, "class", SelectorFacade.class_)

css_selector_builder = SelectorFacade()
