"""Alignment resolution: line breaks and continuation indentation for fragments."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from phpformat.alignment.fragment import Fragment, Layout, LayoutContext, Placement, SubElement
from phpformat.alignment.mode import NO_ALIGNMENT, AlignmentMode, SplitStrategy

if TYPE_CHECKING:
    from collections.abc import Callable


def _spaces(columns: int) -> str:
    return " " * columns


def continuation_column(
    mode: AlignmentMode,
    start: int,
    context: LayoutContext,
    levels: int | None = None,
) -> int:
    """Column at which continuation lines of a fragment begin.

    ``start`` is the column right after the fragment's opening token and
    ``levels`` overrides the context's continuation indentation.
    """
    if levels is None:
        levels = context.continuation_indentation
    if mode.indent_on_column:
        column = start
    elif mode.strategy is SplitStrategy.NEXT_SHIFTED_SPLIT:
        column = context.base_indent + context.indent_width
    else:
        column = context.base_indent + levels * context.indent_width
    if mode.indent_by_one:
        column += context.indent_width
    return column


def fits(fragment: Fragment, column: int, page_width: int) -> bool:
    """Check whether the fragment renders on one line from ``column``."""
    return not fragment.has_break and column + len(fragment.flat_text) <= page_width


def needs_split(fragment: Fragment, mode: AlignmentMode, column: int, page_width: int) -> bool:
    if mode.strategy is SplitStrategy.NO_ALIGNMENT:
        return False
    if mode.strategy is SplitStrategy.ONE_PER_LINE_SPLIT or mode.force_split:
        return True
    return not fits(fragment, column, page_width)


def _initial_break(fragment: Fragment, strategy: SplitStrategy) -> int | None:
    """Index of the element the first forced break goes before, if any."""
    if strategy in (
        SplitStrategy.ONE_PER_LINE_SPLIT,
        SplitStrategy.NEXT_PER_LINE_SPLIT,
        SplitStrategy.NEXT_SHIFTED_SPLIT,
    ):
        return 0
    if strategy is SplitStrategy.COMPACT_FIRST_BREAK_SPLIT:
        if fragment.opening:
            return 0
        return 1 if len(fragment.elements) > 1 else None
    return None


class AlignmentResolver:
    """Lays out fragments under a page-width constraint.

    ``resolve`` is a pure function of the fragment, the mode, the start
    column and the context, so resolving the same input twice yields equal
    layouts.
    """

    def resolve(
        self,
        fragment: Fragment,
        mode: AlignmentMode,
        column: int,
        context: LayoutContext,
    ) -> Layout:
        base = context.base_indent
        if fragment.is_empty:
            if fragment.break_before_closing and not fragment.breaks_only_when_split:
                return Layout(
                    column=column,
                    end_column=base + len(fragment.closing),
                    line_count=2,
                    closing_column=base,
                    base_indent=base,
                )
            end = column + len(fragment.opening) + len(fragment.closing)
            return Layout(column=column, end_column=end, base_indent=base)

        start = column + len(fragment.opening)
        cont = continuation_column(mode, start, context, fragment.continuation_indentation)
        split = needs_split(fragment, mode, column, context.page_width)
        strategy = mode.strategy
        first_break = _initial_break(fragment, strategy) if split else None
        boundary_breaks = split or not fragment.breaks_only_when_split
        open_break = fragment.break_after_opening and boundary_breaks
        close_break = fragment.break_before_closing and boundary_breaks
        last = len(fragment.elements) - 1

        placements: list[Placement] = []
        line = 0
        line_indent = base
        col = start
        for index, element in enumerate(fragment.elements):
            inline_col = col + (len(element.separator) if index else 0)
            if index < last:
                # the text the next element leaves behind when it wraps
                trailing = len(fragment.elements[index + 1].break_suffix)
            else:
                trailing = 0 if close_break else len(fragment.closing)
            if index == 0 and open_break:
                wrap = True
            elif not split:
                wrap = False
            elif index == first_break or strategy is SplitStrategy.ONE_PER_LINE_SPLIT:
                wrap = True
            elif index == 0:
                wrap = False
            elif strategy is SplitStrategy.COMPACT_SPLIT and mode.force_split:
                wrap = True
            else:
                wrap = (
                    inline_col + element.width + trailing > context.page_width
                    and col > line_indent
                )

            if wrap:
                line += 1
                line_indent = cont
                col = cont + len(element.break_prefix)
            else:
                col = inline_col

            nested, end, extra_lines = self._place_element(element, col, line_indent, context)
            placements.append(Placement(line=line, column=col, wrapped=wrap, nested=nested))
            line += extra_lines
            if extra_lines:
                line_indent = self._indent_of_last_line(element, nested, line_indent)
            col = end

        closing_column = None
        if close_break:
            line += 1
            closing_column = base
            col = base
        return Layout(
            column=column,
            placements=tuple(placements),
            end_column=col + len(fragment.closing),
            line_count=line + 1,
            continuation_column=cont,
            closing_column=closing_column,
            base_indent=base,
        )

    def settle(self, fragment: Fragment, column: int, context: LayoutContext) -> Fragment:
        """Attach to each nested fragment the layout it takes at its natural column.

        The natural column is where an element sits while the outer fragment
        stays unbroken. ``resolve`` keeps these layouts for elements that do
        not move, and for moved ones too unless the context asks to re-resolve
        them (``wrap_outer_expressions_when_nested``).
        """
        natural = self.resolve(fragment, NO_ALIGNMENT, column, context)
        return self._attach(fragment, natural)

    def _attach(self, fragment: Fragment, layout: Layout) -> Fragment:
        elements = []
        for element, placement in zip(fragment.elements, layout.placements, strict=True):
            if element.nested is not None and placement.nested is not None:
                element = replace(
                    element,
                    nested=self._attach(element.nested, placement.nested),
                    nested_layout=placement.nested,
                )
            elements.append(element)
        return replace(fragment, elements=tuple(elements))

    def _place_element(
        self,
        element: SubElement,
        col: int,
        line_indent: int,
        context: LayoutContext,
    ) -> tuple[Layout | None, int, int]:
        """Resolve a nested fragment if needed; return (layout, end column, extra lines)."""
        if element.nested is None:
            text = element.text
            if "\n" not in text:
                return None, col + len(text), 0
            lines = text.split("\n")
            return None, len(lines[-1]), len(lines) - 1

        previous = element.nested_layout
        if previous is not None and (
            (previous.column == col and previous.base_indent == line_indent)
            or not context.wrap_outer_expressions_when_nested
        ):
            layout = previous
        else:
            layout = self.resolve(
                element.nested,
                element.nested_mode,
                col,
                context.nested_at(line_indent),
            )
        if layout.is_wrapped:
            return layout, layout.end_column, layout.line_count - 1
        return layout, col + len(element.nested.flat_text), 0

    @staticmethod
    def _indent_of_last_line(
        element: SubElement,
        nested: Layout | None,
        line_indent: int,
    ) -> int:
        if nested is not None and nested.closing_column is not None:
            return nested.closing_column
        if nested is not None and nested.continuation_column is not None:
            return nested.continuation_column
        last_line = element.text.rsplit("\n", 1)[-1]
        return len(last_line) - len(last_line.lstrip(" \t")) or line_indent

    def render(
        self,
        fragment: Fragment,
        layout: Layout,
        indent: Callable[[int], str] = _spaces,
    ) -> str:
        """Turn a resolved layout back into text.

        ``indent`` converts a column count into leading whitespace, which lets
        the caller decide between tabs and spaces.
        """
        out = fragment.opening
        for index, (element, placement) in enumerate(
            zip(fragment.elements, layout.placements, strict=True),
        ):
            if placement.wrapped:
                out = (out + element.break_suffix).rstrip(" \t")
                line_start = placement.column - len(element.break_prefix)
                out += "\n" + indent(line_start) + element.break_prefix
            elif index:
                out += element.separator
            if element.nested is not None and placement.nested is not None:
                out += self.render(element.nested, placement.nested, indent)
            else:
                out += element.text
        if layout.closing_column is not None:
            out = out.rstrip(" \t") + "\n" + indent(layout.closing_column)
        return out + fragment.closing


_default_resolver = AlignmentResolver()


def resolve(
    fragment: Fragment,
    mode: AlignmentMode,
    column: int,
    context: LayoutContext,
) -> Layout:
    """Resolve ``fragment`` with a shared resolver."""
    return _default_resolver.resolve(fragment, mode, column, context)


def layout_text(
    fragment: Fragment,
    mode: AlignmentMode,
    column: int,
    context: LayoutContext,
    indent: Callable[[int], str] = _spaces,
) -> str:
    """Resolve and render in one step."""
    layout = _default_resolver.resolve(fragment, mode, column, context)
    return _default_resolver.render(fragment, layout, indent)
