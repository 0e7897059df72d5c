"""Fragments handed to the alignment resolver and the layouts it produces."""

from __future__ import annotations

from dataclasses import dataclass

from phpformat.alignment.mode import NO_ALIGNMENT, AlignmentMode


@dataclass(frozen=True, slots=True)
class SubElement:
    """One element of a wrappable fragment.

    ``separator`` is written before the element when it stays on the current
    line. When the resolver breaks before the element, ``break_suffix`` ends
    the previous line and ``break_prefix`` starts the new one, so a comma can
    stay behind while a binary operator moves along with its operand.
    """

    text: str = ""
    separator: str = ""
    break_suffix: str = ""
    break_prefix: str = ""
    forced_break: bool = False
    nested: Fragment | None = None
    nested_mode: AlignmentMode = NO_ALIGNMENT
    nested_layout: Layout | None = None

    @property
    def flat_text(self) -> str:
        if self.nested is not None:
            return self.nested.flat_text
        return self.text

    @property
    def width(self) -> int:
        """Width of the first rendered line."""
        return len(self.flat_text.split("\n", 1)[0])

    @property
    def has_break(self) -> bool:
        if self.forced_break or "\n" in self.text:
            return True
        return self.nested is not None and self.nested.has_break


@dataclass(frozen=True, slots=True)
class Fragment:
    """Ordered sub-elements of one construct, between an opening and a closing.

    ``break_after_opening`` and ``break_before_closing`` put the first element
    and the closing token on lines of their own; with ``breaks_only_when_split``
    they apply only when the fragment needs a split. ``continuation_indentation``
    overrides the context value for this fragment alone.
    """

    elements: tuple[SubElement, ...] = ()
    opening: str = ""
    closing: str = ""
    break_after_opening: bool = False
    break_before_closing: bool = False
    breaks_only_when_split: bool = False
    continuation_indentation: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.elements

    @property
    def has_break(self) -> bool:
        if not self.breaks_only_when_split and (
            self.break_before_closing or (self.break_after_opening and self.elements)
        ):
            return True
        return any(element.has_break for element in self.elements)

    @property
    def flat_text(self) -> str:
        """The fragment rendered on a single line."""
        parts = [self.opening]
        for index, element in enumerate(self.elements):
            if index:
                parts.append(element.separator)
            parts.append(element.flat_text)
        parts.append(self.closing)
        return "".join(parts)


@dataclass(frozen=True, slots=True)
class Placement:
    """Where one element landed: line offset from the fragment start and column."""

    line: int
    column: int
    wrapped: bool = False
    nested: Layout | None = None


@dataclass(frozen=True, slots=True)
class Layout:
    """Resolved layout of a fragment starting at ``column``.

    ``base_indent`` is the indentation continuation lines were measured from.
    """

    column: int
    placements: tuple[Placement, ...] = ()
    end_column: int = 0
    line_count: int = 1
    continuation_column: int | None = None
    closing_column: int | None = None
    base_indent: int = 0

    @property
    def is_wrapped(self) -> bool:
        return self.line_count > 1


@dataclass(frozen=True, slots=True)
class LayoutContext:
    """Page constraint and indentation of the construct owning a fragment."""

    page_width: int
    base_indent: int = 0
    indent_width: int = 4
    continuation_indentation: int = 2
    wrap_outer_expressions_when_nested: bool = True

    def nested_at(self, line_indent: int) -> LayoutContext:
        return LayoutContext(
            page_width=self.page_width,
            base_indent=line_indent,
            indent_width=self.indent_width,
            continuation_indentation=self.continuation_indentation,
            wrap_outer_expressions_when_nested=self.wrap_outer_expressions_when_nested,
        )
