"""Brace placement and the scope statement indentation is measured against."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from phpformat.options.constants import BracePosition

if TYPE_CHECKING:
    from phpformat.options.registry import OptionSet


class ConstructKind(Enum):
    """Constructs that own a pair of braces."""

    BLOCK = "block"
    BLOCK_IN_CASE = "block_in_case"
    SWITCH = "switch"
    ARRAY_INITIALIZER = "array_initializer"
    TYPE_DECLARATION = "type_declaration"
    ANONYMOUS_TYPE_DECLARATION = "anonymous_type_declaration"
    METHOD_DECLARATION = "method_declaration"
    CONSTRUCTOR_DECLARATION = "constructor_declaration"
    NAMESPACE_DECLARATION = "namespace_declaration"

    @property
    def option_name(self) -> str:
        return f"brace_position_for_{self.value}"


class IndentReference(Enum):
    """Scope a construct's inner lines are indented from."""

    BLOCK = "block"
    BODY = "body"
    HEADER = "header"
    NONE = "none"


# Toggle deciding whether the inner lines get their own level, and the
# reference that toggle names.
_INDENT_TOGGLES: dict[ConstructKind, tuple[str, IndentReference]] = {
    ConstructKind.BLOCK: ("indent_statements_compare_to_block", IndentReference.BLOCK),
    ConstructKind.BLOCK_IN_CASE: ("indent_statements_compare_to_block", IndentReference.BLOCK),
    ConstructKind.METHOD_DECLARATION: ("indent_statements_compare_to_body", IndentReference.BODY),
    ConstructKind.CONSTRUCTOR_DECLARATION: (
        "indent_statements_compare_to_body",
        IndentReference.BODY,
    ),
    ConstructKind.TYPE_DECLARATION: (
        "indent_body_declarations_compare_to_type_header",
        IndentReference.HEADER,
    ),
    ConstructKind.ANONYMOUS_TYPE_DECLARATION: (
        "indent_body_declarations_compare_to_type_header",
        IndentReference.HEADER,
    ),
    ConstructKind.NAMESPACE_DECLARATION: (
        "indent_body_declarations_compare_to_namespace",
        IndentReference.HEADER,
    ),
    ConstructKind.SWITCH: ("indent_switchstatements_compare_to_switch", IndentReference.HEADER),
}


class BracePolicy:
    """Brace decisions for each construct kind."""

    def __init__(self, options: OptionSet) -> None:
        self.options = options

    def brace_position(self, kind: ConstructKind) -> BracePosition:
        return self.options.get(kind.option_name)

    def opening_brace(self, kind: ConstructKind, header_wrapped: bool = False) -> tuple[bool, int]:
        """Return ``(newline_before, extra_levels)`` for the opening brace.

        ``header_wrapped`` tells whether the construct header was split over
        several lines, which is what NEXT_LINE_ON_WRAP reacts to.
        """
        position = self.brace_position(kind)
        if position is BracePosition.NEXT_LINE:
            return True, 0
        if position is BracePosition.NEXT_LINE_SHIFTED:
            return True, 1
        if position is BracePosition.NEXT_LINE_ON_WRAP:
            return header_wrapped, 0
        return False, 0

    def indent_reference(self, kind: ConstructKind) -> IndentReference:
        """Scope against which the construct's inner lines are indented.

        Array initializers have no statement body; their elements follow the
        continuation indentation instead, so they report ``NONE``.
        """
        toggle = _INDENT_TOGGLES.get(kind)
        if toggle is None:
            return IndentReference.NONE
        name, reference = toggle
        return reference if self.options.get(name) else IndentReference.NONE

    def body_levels(self, kind: ConstructKind, header_wrapped: bool = False) -> int:
        """Levels between the header line and the first inner line."""
        _, shift = self.opening_brace(kind, header_wrapped)
        indented = self.indent_reference(kind) is not IndentReference.NONE
        return shift + int(indented)

    def case_body_levels(self) -> int:
        """Levels between a ``case`` label and the statements under it."""
        return int(bool(self.options.indent_switchstatements_compare_to_cases))

    def break_levels(self) -> int:
        """Levels between a ``case`` label and a ``break`` ending it."""
        return int(bool(self.options.indent_breaks_compare_to_cases))
