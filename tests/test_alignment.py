"""Tests for alignment modes and the line-wrapping resolver."""

import pytest

from phpformat.alignment import (
    COMPACT,
    COMPACT_FIRST_BREAK,
    NEXT_PER_LINE,
    NEXT_SHIFTED,
    NO_ALIGNMENT,
    ONE_PER_LINE,
    AlignmentMode,
    AlignmentResolver,
    Fragment,
    LayoutContext,
    SplitStrategy,
    SubElement,
    continuation_column,
    fits,
    layout_text,
    needs_split,
)


def arguments(*texts: str, opening: str = "f(", closing: str = ")", **flags) -> Fragment:
    """Comma separated fragment like an argument list."""
    elements = [SubElement(text=texts[0])]
    elements.extend(SubElement(text=text, separator=", ", break_suffix=",") for text in texts[1:])
    return Fragment(elements=tuple(elements), opening=opening, closing=closing, **flags)


class TestAlignmentMode:
    """Tests for the packed alignment value."""

    def test_pack_strategies(self) -> None:
        """Test the bit value of each strategy."""
        assert NO_ALIGNMENT.pack() == 0
        assert COMPACT.pack() == 16
        assert COMPACT_FIRST_BREAK.pack() == 32
        assert ONE_PER_LINE.pack() == 48
        assert NEXT_SHIFTED.pack() == 64
        assert NEXT_PER_LINE.pack() == 80

    def test_pack_modifiers(self) -> None:
        """Test modifier bits combine with the strategy."""
        mode = COMPACT.with_modifiers(force_split=True, indent_by_one=True)
        assert mode.pack() == 16 | 1 | 4
        assert AlignmentMode.unpack(21) == mode

    def test_unpack_every_combination(self) -> None:
        """Test each strategy with each modifier set survives packing."""
        for strategy in SplitStrategy:
            for bits in range(8):
                value = strategy.value | bits
                assert AlignmentMode.unpack(value).pack() == value

    def test_unpack_rejects_unknown_bits(self) -> None:
        """Test corrupted values are rejected."""
        with pytest.raises(ValueError, match="Unknown alignment bits"):
            AlignmentMode.unpack(8)
        with pytest.raises(ValueError):
            AlignmentMode.unpack(1024)
        with pytest.raises(ValueError):
            AlignmentMode.unpack(-1)

    def test_with_strategy_keeps_modifiers(self) -> None:
        """Test strategy and modifiers change independently."""
        mode = COMPACT.with_modifiers(indent_on_column=True)
        changed = mode.with_strategy(SplitStrategy.ONE_PER_LINE_SPLIT)
        assert changed.strategy is SplitStrategy.ONE_PER_LINE_SPLIT
        assert changed.indent_on_column is True
        assert changed.with_modifiers(force_split=True).indent_on_column is True

    def test_str(self) -> None:
        """Test readable names."""
        assert str(COMPACT) == "COMPACT_SPLIT"
        assert str(ONE_PER_LINE.with_modifiers(indent_by_one=True)) == (
            "ONE_PER_LINE_SPLIT+INDENT_BY_ONE"
        )

    def test_splits(self) -> None:
        """Test only NO_ALIGNMENT never splits."""
        assert not NO_ALIGNMENT.splits
        assert COMPACT.splits


class TestFragments:
    """Tests for fragment measurements."""

    def test_flat_text(self) -> None:
        """Test single-line rendering."""
        fragment = arguments("a", "bb")
        assert fragment.flat_text == "f(a, bb)"
        assert not fragment.has_break

    def test_nested_flat_text(self) -> None:
        """Test nested fragments render inline."""
        inner = SubElement(nested=arguments("x", opening="g("), separator=", ")
        fragment = Fragment(elements=(SubElement(text="a"), inner), opening="f(", closing=")")
        assert fragment.flat_text == "f(a, g(x))"

    def test_forced_breaks(self) -> None:
        """Test elements and boundaries that force a break."""
        assert SubElement(text="a\nb").has_break
        assert SubElement(text="a\nbbb").width == 1
        assert arguments("a", break_before_closing=True).has_break
        assert not arguments("a", break_before_closing=True, breaks_only_when_split=True).has_break


class TestResolver:
    """Tests for layout resolution."""

    def setup_method(self) -> None:
        """Set up each test."""
        self.context = LayoutContext(page_width=80)

    def test_fits_on_one_line(self) -> None:
        """Test short fragments stay flat."""
        layout = AlignmentResolver().resolve(arguments("a", "bb"), COMPACT, 0, self.context)
        assert layout.line_count == 1
        assert not layout.is_wrapped
        assert layout.end_column == len("f(a, bb)")

    def test_no_alignment_never_splits(self) -> None:
        """Test NO_ALIGNMENT ignores the page width."""
        context = LayoutContext(page_width=5)
        assert layout_text(arguments("a", "bb"), NO_ALIGNMENT, 0, context) == "f(a, bb)"

    def test_one_per_line(self) -> None:
        """Test every element on its own continuation line."""
        text = layout_text(arguments("a", "bb"), ONE_PER_LINE, 0, self.context)
        assert text == "f(\n        a,\n        bb)"

    def test_compact_breaks_where_needed(self) -> None:
        """Test compact splitting keeps elements while they fit."""
        context = LayoutContext(page_width=11)
        text = layout_text(arguments("aaa", "bbb", "ccc"), COMPACT, 0, context)
        assert text == "f(aaa, bbb,\n        ccc)"

    def test_compact_counts_trailing_comma(self) -> None:
        """Test the comma left behind by a wrapped element counts toward the width."""
        fragment = arguments("aaa", "bbb", "ccc")
        assert layout_text(fragment, COMPACT, 0, LayoutContext(page_width=11)) == (
            "f(aaa, bbb,\n        ccc)"
        )
        assert layout_text(fragment, COMPACT, 0, LayoutContext(page_width=10)) == (
            "f(aaa,\n        bbb,\n        ccc)"
        )

    def test_next_per_line_fits(self) -> None:
        """Test next-per-line keeps a fitting fragment flat."""
        assert layout_text(arguments("a", "bb"), NEXT_PER_LINE, 0, self.context) == "f(a, bb)"

    def test_next_per_line_breaks_each_element(self) -> None:
        """Test next-per-line moves the first element and wraps the rest."""
        context = LayoutContext(page_width=12)
        text = layout_text(arguments("aaa", "bbb", "ccc"), NEXT_PER_LINE, 0, context)
        assert text == "f(\n        aaa,\n        bbb,\n        ccc)"

    def test_compact_force_split(self) -> None:
        """Test forced compact splitting breaks at every separator."""
        mode = COMPACT.with_modifiers(force_split=True)
        text = layout_text(arguments("a", "bb", "c"), mode, 0, self.context)
        assert text == "f(a,\n        bb,\n        c)"

    def test_compact_first_break(self) -> None:
        """Test the first element moves off the opening line."""
        context = LayoutContext(page_width=6)
        text = layout_text(arguments("a", "b"), COMPACT_FIRST_BREAK, 0, context)
        assert text.startswith("f(\n        a,")

    def test_next_shifted(self) -> None:
        """Test shifted continuation uses one level."""
        context = LayoutContext(page_width=6)
        text = layout_text(arguments("a", "bb"), NEXT_SHIFTED, 0, context)
        assert text == "f(\n    a,\n    bb)"

    def test_indent_on_column(self) -> None:
        """Test continuation lines align after the opening."""
        context = LayoutContext(page_width=11)
        mode = COMPACT.with_modifiers(indent_on_column=True)
        text = layout_text(arguments("aaa", "bbb", "ccc"), mode, 0, context)
        assert text == "f(aaa, bbb,\n  ccc)"

    def test_indent_by_one(self) -> None:
        """Test one extra level on continuation lines."""
        mode = ONE_PER_LINE.with_modifiers(indent_by_one=True)
        text = layout_text(arguments("a"), mode, 0, self.context)
        assert text == "f(\n            a)"

    def test_break_prefix_moves_with_element(self) -> None:
        """Test operators wrapped before their operand."""
        elements = (
            SubElement(text="$alpha"),
            SubElement(text="$beta", separator=" + ", break_prefix="+ "),
        )
        context = LayoutContext(page_width=10)
        text = layout_text(Fragment(elements=elements), COMPACT, 0, context)
        assert text == "$alpha\n        + $beta"

    def test_boundary_breaks(self) -> None:
        """Test own lines for the first element and the closing token."""
        fragment = arguments("a", "bb", break_after_opening=True, break_before_closing=True)
        assert layout_text(fragment, NO_ALIGNMENT, 0, self.context) == "f(\n        a, bb\n)"

    def test_boundary_breaks_only_when_split(self) -> None:
        """Test conditional boundary breaks stay off while the fragment fits."""
        fragment = arguments(
            "a",
            "bb",
            break_after_opening=True,
            break_before_closing=True,
            breaks_only_when_split=True,
        )
        assert layout_text(fragment, COMPACT, 0, self.context) == "f(a, bb)"
        assert layout_text(fragment, ONE_PER_LINE, 0, self.context) == (
            "f(\n        a,\n        bb\n)"
        )

    def test_empty_fragment_with_closing_break(self) -> None:
        """Test an empty body closed on its own line."""
        fragment = Fragment(opening="array(", closing=")", break_before_closing=True)
        layout = AlignmentResolver().resolve(fragment, NO_ALIGNMENT, 0, self.context)
        assert layout.line_count == 2
        assert AlignmentResolver().render(fragment, layout) == "array(\n)"

    def test_base_indent(self) -> None:
        """Test continuation measured from the owning line's indentation."""
        context = LayoutContext(page_width=80, base_indent=4)
        text = layout_text(arguments("a"), ONE_PER_LINE, 4, context)
        assert text == "f(\n            a)"

    def test_custom_indent(self) -> None:
        """Test the indent callback controls leading whitespace."""
        text = layout_text(
            arguments("a", "bb"),
            ONE_PER_LINE,
            0,
            self.context,
            indent=lambda columns: "\t" * (columns // 4),
        )
        assert text == "f(\n\t\ta,\n\t\tbb)"

    def test_deterministic(self) -> None:
        """Test resolving twice yields equal layouts."""
        resolver = AlignmentResolver()
        context = LayoutContext(page_width=12)
        fragment = arguments("alpha", "beta", "gamma")
        assert resolver.resolve(fragment, COMPACT, 3, context) == resolver.resolve(
            fragment,
            COMPACT,
            3,
            context,
        )


class TestNestedLayouts:
    """Tests for reusing the layout a nested fragment took at its natural column."""

    def setup_method(self) -> None:
        """Set up each test."""
        self.resolver = AlignmentResolver()
        self.context = LayoutContext(page_width=21)
        self.inner = arguments("aaaa", "bbbb", opening="g(")
        self.natural = self.resolver.resolve(self.inner, COMPACT, 12, self.context.nested_at(0))

    def outer(self, nested_layout=None) -> Fragment:
        nested = SubElement(
            nested=self.inner,
            nested_mode=COMPACT,
            separator=", ",
            break_suffix=",",
            nested_layout=nested_layout,
        )
        return Fragment(elements=(SubElement(text="xxxxxxxx"), nested), opening="f(", closing=")")

    def test_natural_layout_is_wrapped(self) -> None:
        """Test the inner call does not fit at its natural column."""
        assert self.natural.is_wrapped
        assert self.natural.column == 12

    def test_moved_element_keeps_layout(self) -> None:
        """Test a moved element keeps its layout when outer wrapping is off."""
        context = LayoutContext(page_width=21, wrap_outer_expressions_when_nested=False)
        fragment = self.outer(self.natural)
        layout = self.resolver.resolve(fragment, COMPACT, 0, context)
        placement = layout.placements[1]
        assert placement.wrapped
        assert placement.column == 8
        assert placement.nested is self.natural
        assert self.resolver.render(fragment, layout) == (
            "f(xxxxxxxx,\n        g(aaaa,\n        bbbb))"
        )

    def test_moved_element_is_resolved_again(self) -> None:
        """Test a moved element is laid out again at its new column."""
        fragment = self.outer(self.natural)
        layout = self.resolver.resolve(fragment, COMPACT, 0, self.context)
        placement = layout.placements[1]
        assert placement.column == 8
        assert not placement.nested.is_wrapped
        assert placement.nested == self.resolver.resolve(
            self.inner,
            COMPACT,
            8,
            self.context.nested_at(8),
        )
        assert self.resolver.render(fragment, layout) == "f(xxxxxxxx,\n        g(aaaa, bbbb))"

    def test_unmoved_element_keeps_layout(self) -> None:
        """Test an element left at its natural column reuses its layout."""
        layout = self.resolver.resolve(self.outer(self.natural), NO_ALIGNMENT, 0, self.context)
        assert layout.placements[1].nested is self.natural
        assert layout == self.resolver.resolve(self.outer(), NO_ALIGNMENT, 0, self.context)

    def test_settle_attaches_natural_layouts(self) -> None:
        """Test settling records each nested layout on its element."""
        settled = self.resolver.settle(self.outer(), 0, self.context)
        assert settled.elements[1].nested_layout == self.natural
        assert settled.elements[0].nested_layout is None
        assert settled.flat_text == self.outer().flat_text


class TestHelpers:
    """Tests for the module helpers."""

    def test_continuation_column(self) -> None:
        """Test the column continuation lines start at."""
        context = LayoutContext(page_width=80, base_indent=4)
        assert continuation_column(COMPACT, 10, context) == 12
        assert continuation_column(COMPACT, 10, context, levels=1) == 8
        assert continuation_column(NEXT_SHIFTED, 10, context) == 8
        assert continuation_column(COMPACT.with_modifiers(indent_on_column=True), 10, context) == 10

    def test_fits_and_needs_split(self) -> None:
        """Test the split decision."""
        fragment = arguments("a", "bb")
        assert fits(fragment, 0, 8)
        assert not fits(fragment, 1, 8)
        assert needs_split(fragment, COMPACT, 1, 8)
        assert not needs_split(fragment, NO_ALIGNMENT, 1, 8)
        assert needs_split(fragment, ONE_PER_LINE, 0, 80)
