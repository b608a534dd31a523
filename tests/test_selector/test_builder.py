"""Tests for SelectorBuilder: fragment rendering, ordering and singletons."""

import pytest

from selectorkit.selector import (
    DuplicatePartError,
    OrderError,
    PartKind,
    SelectorBuilder,
    SelectorError,
)


# ---------------------------------------------------------------------------
# Fragment rendering
# ---------------------------------------------------------------------------


class TestFragments:
    def test_element_verbatim(self):
        assert SelectorBuilder().element("div").stringify() == "div"

    def test_id(self):
        assert SelectorBuilder().id("main").stringify() == "#main"

    def test_class(self):
        assert SelectorBuilder().class_("container").stringify() == ".container"

    def test_attr_keeps_raw_expression(self):
        assert SelectorBuilder().attr('href$=".png"').stringify() == '[href$=".png"]'

    def test_pseudo_class(self):
        assert SelectorBuilder().pseudo_class("focus").stringify() == ":focus"

    def test_pseudo_element(self):
        assert SelectorBuilder().pseudo_element("after").stringify() == "::after"

    def test_class_keyword_alias(self):
        builder = SelectorBuilder()
        assert getattr(builder, "class")("x") is builder
        assert builder.stringify() == ".x"

    def test_empty_builder(self):
        assert SelectorBuilder().stringify() == ""


class TestChaining:
    def test_methods_return_same_builder(self):
        builder = SelectorBuilder()
        assert builder.element("a") is builder
        assert builder.pseudo_class("hover") is builder

    def test_full_selector(self):
        text = (
            SelectorBuilder()
            .element("a")
            .id("home")
            .class_("nav")
            .class_("active")
            .attr("target")
            .attr('rel="next"')
            .pseudo_class("hover")
            .pseudo_class("focus")
            .pseudo_element("before")
            .stringify()
        )
        assert text == 'a#home.nav.active[target][rel="next"]:hover:focus::before'

    def test_id_class_class(self):
        text = SelectorBuilder().id("main").class_("container").class_("editable").stringify()
        assert text == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        text = SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        assert text == 'a[href$=".png"]:focus'

    def test_skipping_kinds_is_allowed(self):
        text = SelectorBuilder().element("p").pseudo_element("first-line").stringify()
        assert text == "p::first-line"

    def test_generic_append(self):
        builder = SelectorBuilder().append(PartKind.ELEMENT, "li").append(PartKind.CLASS, "item")
        assert builder.stringify() == "li.item"
        assert builder.part_kinds == [PartKind.ELEMENT, PartKind.CLASS]


class TestStringify:
    def test_idempotent(self):
        builder = SelectorBuilder().element("div").class_("a")
        assert builder.stringify() == builder.stringify() == "div.a"

    def test_does_not_affect_later_appends(self):
        builder = SelectorBuilder().element("div")
        builder.stringify()
        builder.class_("a")
        assert builder.stringify() == "div.a"

    def test_str_matches_stringify(self):
        builder = SelectorBuilder().element("div").id("x")
        assert str(builder) == builder.stringify()

    def test_repr(self):
        assert repr(SelectorBuilder().element("div")) == "SelectorBuilder('div')"


# ---------------------------------------------------------------------------
# Singleton parts
# ---------------------------------------------------------------------------


class TestDuplicateParts:
    def test_second_element(self):
        with pytest.raises(DuplicatePartError):
            SelectorBuilder().element("div").id("main").element("span")

    def test_second_id(self):
        with pytest.raises(DuplicatePartError):
            SelectorBuilder().id("a").id("b")

    def test_second_pseudo_element(self):
        with pytest.raises(DuplicatePartError):
            SelectorBuilder().pseudo_element("before").pseudo_element("after")

    def test_repeatable_kinds(self):
        text = (
            SelectorBuilder()
            .class_("a")
            .class_("b")
            .attr("x")
            .attr("y")
            .pseudo_class("hover")
            .pseudo_class("focus")
            .stringify()
        )
        assert text == ".a.b[x][y]:hover:focus"

    def test_error_carries_kind(self):
        with pytest.raises(DuplicatePartError) as exc_info:
            SelectorBuilder().id("a").id("b")
        assert exc_info.value.kind is PartKind.ID

    def test_counters(self):
        builder = SelectorBuilder().element("div").id("x").pseudo_element("after")
        assert builder.element_count == 1
        assert builder.id_count == 1
        assert builder.pseudo_element_count == 1


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOrdering:
    def test_element_after_class(self):
        with pytest.raises(OrderError):
            SelectorBuilder().class_("a").element("div")

    def test_id_after_class(self):
        with pytest.raises(OrderError):
            SelectorBuilder().element("div").class_("a").id("main")

    def test_attr_after_pseudo_class(self):
        with pytest.raises(OrderError):
            SelectorBuilder().pseudo_class("hover").attr("href")

    def test_class_after_pseudo_element(self):
        with pytest.raises(OrderError):
            SelectorBuilder().pseudo_element("after").class_("a")

    def test_every_descending_pair_fails(self):
        for earlier in PartKind:
            for later in PartKind:
                if later >= earlier:
                    continue
                builder = SelectorBuilder().append(earlier, "x")
                with pytest.raises(OrderError):
                    builder.append(later, "y")

    def test_error_carries_both_kinds(self):
        with pytest.raises(OrderError) as exc_info:
            SelectorBuilder().attr("x").class_("a")
        assert exc_info.value.kind is PartKind.CLASS
        assert exc_info.value.previous is PartKind.ATTRIBUTE

    def test_message_names_required_order(self):
        with pytest.raises(OrderError, match="element, id, class, attribute, pseudo-class, pseudo-element"):
            SelectorBuilder().id("a").element("div")

    def test_duplicate_reported_before_order(self):
        with pytest.raises(DuplicatePartError):
            SelectorBuilder().element("div").id("a").element("span")

    def test_errors_share_base(self):
        assert issubclass(OrderError, SelectorError)
        assert issubclass(DuplicatePartError, SelectorError)


# ---------------------------------------------------------------------------
# Failed appends
# ---------------------------------------------------------------------------


class TestFailedAppendLeavesStateUnchanged:
    def test_order_error(self):
        builder = SelectorBuilder().element("div").class_("a")
        with pytest.raises(OrderError):
            builder.id("main")
        assert builder.stringify() == "div.a"
        assert builder.part_kinds == [PartKind.ELEMENT, PartKind.CLASS]
        assert builder.id_count == 0

    def test_duplicate_error(self):
        builder = SelectorBuilder().element("div")
        with pytest.raises(DuplicatePartError):
            builder.element("span")
        assert builder.stringify() == "div"
        assert builder.element_count == 1
