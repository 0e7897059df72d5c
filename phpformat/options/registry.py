"""Option table and the OptionSet consumed by the formatter."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from phpformat.alignment.mode import (
    COMPACT,
    NEXT_PER_LINE,
    NO_ALIGNMENT,
    AlignmentMode,
)
from phpformat.options.constants import KEY_PREFIX, BracePosition, LineSeparator, TabChar
from phpformat.options.descriptors import (
    AlignmentCodec,
    BooleanCodec,
    ChoiceCodec,
    InsertCodec,
    IntegerCodec,
    OptionDescriptor,
)

logger = logging.getLogger(__name__)


class OptionError(KeyError):
    """Unknown option name or a value of the wrong type."""


_ALIGNMENT_OPTIONS: tuple[tuple[str, AlignmentMode], ...] = (
    ("alignment_for_arguments_in_allocation_expression", COMPACT),
    ("alignment_for_arguments_in_explicit_constructor_call", COMPACT),
    ("alignment_for_arguments_in_method_invocation", COMPACT),
    ("alignment_for_arguments_in_qualified_allocation_expression", COMPACT),
    ("alignment_for_assignment", NO_ALIGNMENT),
    ("alignment_for_binary_expression", COMPACT),
    ("alignment_for_compact_if", COMPACT),
    ("alignment_for_concat_expression", COMPACT),
    ("alignment_for_conditional_expression", NEXT_PER_LINE),
    ("alignment_for_expressions_in_array_initializer", COMPACT),
    ("alignment_for_method_declaration", NO_ALIGNMENT),
    ("alignment_for_multiple_fields", COMPACT),
    ("alignment_for_parameters_in_constructor_declaration", COMPACT),
    ("alignment_for_parameters_in_method_declaration", COMPACT),
    ("alignment_for_selector_in_method_invocation", COMPACT),
    ("alignment_for_superclass_in_type_declaration", COMPACT),
    ("alignment_for_superinterfaces_in_type_declaration", COMPACT),
    ("alignment_for_throws_clause_in_constructor_declaration", COMPACT),
    ("alignment_for_throws_clause_in_method_declaration", COMPACT),
)

_BRACE_OPTIONS: tuple[str, ...] = (
    "brace_position_for_anonymous_type_declaration",
    "brace_position_for_array_initializer",
    "brace_position_for_block",
    "brace_position_for_block_in_case",
    "brace_position_for_constructor_declaration",
    "brace_position_for_method_declaration",
    "brace_position_for_namespace_declaration",
    "brace_position_for_switch",
    "brace_position_for_type_declaration",
)

# name, default, minimum, maximum
_INTEGER_OPTIONS: tuple[tuple[str, int, int, int | None], ...] = (
    ("blank_lines_after_imports", 1, 0, 99),
    ("blank_lines_after_package", 1, 0, 99),
    ("blank_lines_at_beginning_of_method_body", 0, 0, 99),
    ("blank_lines_before_field", 0, 0, 99),
    ("blank_lines_before_first_class_body_declaration", 0, 0, 99),
    ("blank_lines_before_imports", 1, 0, 99),
    ("blank_lines_before_member_type", 1, 0, 99),
    ("blank_lines_before_method", 0, 0, 99),
    ("blank_lines_before_new_chunk", 1, 0, 99),
    ("blank_lines_before_package", 0, 0, 99),
    ("blank_lines_between_import_groups", 1, 0, 99),
    ("blank_lines_between_type_declarations", 1, 0, 99),
    ("continuation_indentation", 2, 0, 32),
    ("continuation_indentation_for_array_initializer", 2, 0, 32),
    ("indentation_size", 4, 0, 32),
    ("initial_indentation_level", 0, 0, 64),
    ("number_of_empty_lines_to_preserve", 1, 0, 99),
    ("page_width", 80, 0, 9999),
    ("tab_size", 4, 0, 32),
)

_FLAG_OPTIONS: tuple[tuple[str, bool], ...] = (
    ("align_type_members_on_columns", False),
    ("indent_statements_compare_to_block", True),
    ("indent_statements_compare_to_body", True),
    ("indent_body_declarations_compare_to_type_header", True),
    ("indent_breaks_compare_to_cases", True),
    ("indent_empty_lines", False),
    ("indent_switchstatements_compare_to_cases", True),
    ("indent_switchstatements_compare_to_switch", False),
    ("compact_else_if", True),
    ("keep_guardian_clause_on_one_line", False),
    ("keep_else_statement_on_same_line", False),
    ("keep_empty_array_initializer_on_one_line", False),
    ("keep_simple_if_on_one_line", False),
    ("keep_then_statement_on_same_line", False),
    ("never_indent_block_comments_on_first_column", False),
    ("never_indent_line_comments_on_first_column", False),
    ("join_lines_in_comments", True),
    ("join_wrapped_lines", True),
    ("put_empty_statement_on_new_line", True),
    ("use_tabs_only_for_leading_indentations", False),
    ("wrap_before_binary_operator", True),
    ("use_tags", False),
    ("wrap_outer_expressions_when_nested", True),
    ("format_html_region", False),
    ("align_php_region_with_open_tag", False),
    ("indent_body_declarations_compare_to_namespace", False),
    ("wrap_array_in_arguments", True),
    ("wrap_before_concat_operator", True),
)

_INSERT_OPTIONS: tuple[tuple[str, bool], ...] = (
    ("insert_new_line_after_label", False),
    ("insert_new_line_after_opening_brace_in_array_initializer", False),
    ("insert_new_line_at_end_of_file_if_missing", False),
    ("insert_new_line_before_catch_in_try_statement", False),
    ("insert_new_line_before_closing_brace_in_array_initializer", False),
    ("insert_new_line_before_else_in_if_statement", False),
    ("insert_new_line_before_finally_in_try_statement", False),
    ("insert_new_line_before_while_in_do_statement", False),
    ("insert_new_line_in_empty_anonymous_type_declaration", True),
    ("insert_new_line_in_empty_block", True),
    ("insert_new_line_in_empty_method_body", True),
    ("insert_new_line_in_empty_type_declaration", True),
    ("insert_new_line_after_namespace_declaration", True),
    ("insert_space_after_and_in_type_parameter", True),
    ("insert_space_after_assignment_operator", True),
    ("insert_space_after_binary_operator", True),
    ("insert_space_after_closing_angle_bracket_in_type_arguments", True),
    ("insert_space_after_closing_angle_bracket_in_type_parameters", True),
    ("insert_space_after_closing_paren_in_cast", True),
    ("insert_space_after_closing_brace_in_block", True),
    ("insert_space_after_colon_in_assert", True),
    ("insert_space_after_colon_in_case", True),
    ("insert_space_after_colon_in_conditional", True),
    ("insert_space_after_colon_in_for", True),
    ("insert_space_after_colon_in_labeled_statement", True),
    ("insert_space_after_comma_in_allocation_expression", True),
    ("insert_space_after_comma_in_array_initializer", True),
    ("insert_space_after_comma_in_constructor_declaration_parameters", True),
    ("insert_space_after_comma_in_constructor_declaration_throws", True),
    ("insert_space_after_comma_in_explicit_constructor_call_arguments", True),
    ("insert_space_after_comma_in_for_increments", True),
    ("insert_space_after_comma_in_for_inits", True),
    ("insert_space_after_comma_in_method_invocation_arguments", True),
    ("insert_space_after_comma_in_method_declaration_parameters", True),
    ("insert_space_after_comma_in_method_declaration_throws", True),
    ("insert_space_after_comma_in_multiple_field_declarations", True),
    ("insert_space_after_comma_in_multiple_local_declarations", True),
    ("insert_space_after_comma_in_parameterized_type_reference", True),
    ("insert_space_after_comma_in_superinterfaces", True),
    ("insert_space_after_comma_in_type_arguments", True),
    ("insert_space_after_comma_in_type_parameters", True),
    ("insert_space_after_ellipsis", True),
    ("insert_space_after_opening_angle_bracket_in_parameterized_type_reference", False),
    ("insert_space_after_opening_angle_bracket_in_type_arguments", False),
    ("insert_space_after_opening_angle_bracket_in_type_parameters", False),
    ("insert_space_after_opening_bracket_in_array_allocation_expression", False),
    ("insert_space_after_opening_bracket_in_array_reference", False),
    ("insert_space_after_opening_brace_in_array_initializer", False),
    ("insert_space_after_opening_paren_in_cast", False),
    ("insert_space_after_opening_paren_in_catch", False),
    ("insert_space_after_opening_paren_in_constructor_declaration", False),
    ("insert_space_after_opening_paren_in_for", False),
    ("insert_space_after_opening_paren_in_if", False),
    ("insert_space_after_opening_paren_in_method_declaration", False),
    ("insert_space_after_opening_paren_in_method_invocation", False),
    ("insert_space_after_opening_paren_in_parenthesized_expression", False),
    ("insert_space_after_opening_paren_in_switch", False),
    ("insert_space_after_opening_paren_in_synchronized", False),
    ("insert_space_after_opening_paren_in_while", False),
    ("insert_space_after_postfix_operator", False),
    ("insert_space_after_prefix_operator", False),
    ("insert_space_after_question_in_conditional", True),
    ("insert_space_after_question_in_wilcard", False),
    ("insert_space_after_semicolon_in_for", True),
    ("insert_space_after_unary_operator", False),
    ("insert_space_before_and_in_type_parameter", True),
    ("insert_space_before_assignment_operator", True),
    ("insert_space_before_binary_operator", True),
    ("insert_space_before_closing_angle_bracket_in_parameterized_type_reference", False),
    ("insert_space_before_closing_angle_bracket_in_type_arguments", False),
    ("insert_space_before_closing_angle_bracket_in_type_parameters", False),
    ("insert_space_before_closing_brace_in_array_initializer", False),
    ("insert_space_before_closing_bracket_in_array_allocation_expression", False),
    ("insert_space_before_closing_bracket_in_array_reference", False),
    ("insert_space_before_closing_paren_in_cast", False),
    ("insert_space_before_closing_paren_in_catch", False),
    ("insert_space_before_closing_paren_in_constructor_declaration", False),
    ("insert_space_before_closing_paren_in_for", False),
    ("insert_space_before_closing_paren_in_if", False),
    ("insert_space_before_closing_paren_in_method_declaration", False),
    ("insert_space_before_closing_paren_in_method_invocation", False),
    ("insert_space_before_closing_paren_in_parenthesized_expression", False),
    ("insert_space_before_closing_paren_in_switch", False),
    ("insert_space_before_closing_paren_in_synchronized", False),
    ("insert_space_before_closing_paren_in_while", False),
    ("insert_space_before_colon_in_assert", True),
    ("insert_space_before_colon_in_case", False),
    ("insert_space_before_colon_in_conditional", True),
    ("insert_space_before_colon_in_default", False),
    ("insert_space_before_colon_in_for", True),
    ("insert_space_before_colon_in_labeled_statement", False),
    ("insert_space_before_comma_in_allocation_expression", False),
    ("insert_space_before_comma_in_array_initializer", False),
    ("insert_space_before_comma_in_constructor_declaration_parameters", False),
    ("insert_space_before_comma_in_constructor_declaration_throws", False),
    ("insert_space_before_comma_in_explicit_constructor_call_arguments", False),
    ("insert_space_before_comma_in_for_increments", False),
    ("insert_space_before_comma_in_for_inits", False),
    ("insert_space_before_comma_in_method_invocation_arguments", False),
    ("insert_space_before_comma_in_method_declaration_parameters", False),
    ("insert_space_before_comma_in_method_declaration_throws", False),
    ("insert_space_before_comma_in_multiple_field_declarations", False),
    ("insert_space_before_comma_in_multiple_local_declarations", False),
    ("insert_space_before_comma_in_parameterized_type_reference", False),
    ("insert_space_before_comma_in_superinterfaces", False),
    ("insert_space_before_comma_in_type_arguments", False),
    ("insert_space_before_comma_in_type_parameters", False),
    ("insert_space_before_ellipsis", False),
    ("insert_space_before_parenthesized_expression_in_return", True),
    ("insert_space_before_parenthesized_expression_in_throw", True),
    ("insert_space_before_opening_angle_bracket_in_parameterized_type_reference", False),
    ("insert_space_before_opening_angle_bracket_in_type_arguments", False),
    ("insert_space_before_opening_angle_bracket_in_type_parameters", False),
    ("insert_space_before_opening_brace_in_anonymous_type_declaration", True),
    ("insert_space_before_opening_brace_in_array_initializer", False),
    ("insert_space_before_opening_brace_in_block", True),
    ("insert_space_before_opening_brace_in_constructor_declaration", True),
    ("insert_space_before_opening_brace_in_method_declaration", True),
    ("insert_space_before_opening_brace_in_switch", True),
    ("insert_space_before_opening_brace_in_type_declaration", True),
    ("insert_space_before_opening_bracket_in_array_allocation_expression", False),
    ("insert_space_before_opening_bracket_in_array_reference", False),
    ("insert_space_before_opening_bracket_in_array_type_reference", False),
    ("insert_space_before_opening_paren_in_catch", True),
    ("insert_space_before_opening_paren_in_constructor_declaration", False),
    ("insert_space_before_opening_paren_in_for", True),
    ("insert_space_before_opening_paren_in_if", True),
    ("insert_space_before_opening_paren_in_method_invocation", False),
    ("insert_space_before_opening_paren_in_method_declaration", False),
    ("insert_space_before_opening_paren_in_switch", True),
    ("insert_space_before_opening_paren_in_synchronized", True),
    ("insert_space_before_opening_paren_in_parenthesized_expression", False),
    ("insert_space_before_opening_paren_in_while", True),
    ("insert_space_before_postfix_operator", False),
    ("insert_space_before_prefix_operator", False),
    ("insert_space_before_question_in_conditional", True),
    ("insert_space_before_question_in_wilcard", False),
    ("insert_space_before_semicolon", False),
    ("insert_space_before_semicolon_in_for", False),
    ("insert_space_before_unary_operator", False),
    ("insert_space_between_brackets_in_array_type_reference", False),
    ("insert_space_between_empty_braces_in_array_initializer", False),
    ("insert_space_between_empty_brackets_in_array_allocation_expression", False),
    ("insert_space_between_empty_parens_in_constructor_declaration", False),
    ("insert_space_between_empty_parens_in_method_declaration", False),
    ("insert_space_between_empty_parens_in_method_invocation", False),
    ("insert_space_before_opening_brace_in_namespace_declaration", True),
    ("insert_space_before_double_arrow_operator", True),
    ("insert_space_before_double_arrow_operator_with_filler", False),
    ("insert_space_after_double_arrow_operator", True),
    ("insert_space_before_double_colon_operator", False),
    ("insert_space_after_double_colon_operator", False),
    ("insert_space_before_object_operator", False),
    ("insert_space_after_object_operator", False),
    ("insert_space_before_parenthesized_expression_in_echo", True),
    ("insert_new_line_after_opening_brace_in_array_initializer_in_arguments", True),
    ("insert_space_before_concat_operator", True),
    ("insert_space_after_concat_operator", True),
)


def _group_for(name: str) -> str:
    if name.startswith("alignment_for_") or name.startswith("wrap_"):
        return "line_wrapping"
    if name in ("page_width", "join_wrapped_lines"):
        return "line_wrapping"
    if name.startswith("brace_position_"):
        return "braces"
    if name.startswith("blank_lines_") or name == "number_of_empty_lines_to_preserve":
        return "blank_lines"
    if name.startswith("insert_new_line_"):
        return "new_lines"
    if name.startswith("insert_space_"):
        return "white_space"
    if name.startswith("keep_") or name in ("compact_else_if", "put_empty_statement_on_new_line"):
        return "control_statements"
    if name.startswith("never_indent_") or name == "join_lines_in_comments":
        return "comments"
    if name.startswith(("indent", "continuation_", "tab_", "use_tabs_")):
        return "indentation"
    if name == "initial_indentation_level":
        return "indentation"
    return "other"


def _build_table() -> tuple[OptionDescriptor, ...]:
    alignment = AlignmentCodec()
    braces = ChoiceCodec(BracePosition)
    flag = BooleanCodec()
    insert = InsertCodec()

    table: list[OptionDescriptor] = []
    table.extend(
        OptionDescriptor(name, alignment, default, _group_for(name))
        for name, default in _ALIGNMENT_OPTIONS
    )
    table.extend(
        OptionDescriptor(name, braces, BracePosition.END_OF_LINE, _group_for(name))
        for name in _BRACE_OPTIONS
    )
    table.extend(
        OptionDescriptor(name, IntegerCodec(minimum, maximum), default, _group_for(name))
        for name, default, minimum, maximum in _INTEGER_OPTIONS
    )
    table.extend(
        OptionDescriptor(name, flag, default, _group_for(name)) for name, default in _FLAG_OPTIONS
    )
    table.extend(
        OptionDescriptor(name, insert, default, _group_for(name))
        for name, default in _INSERT_OPTIONS
    )
    table.append(OptionDescriptor("tab_char", ChoiceCodec(TabChar), TabChar.TAB, "indentation"))
    table.append(
        OptionDescriptor("line_separator", ChoiceCodec(LineSeparator), LineSeparator.LF, "other"),
    )
    return tuple(sorted(table, key=lambda d: d.name))


OPTION_DESCRIPTORS = _build_table()
_BY_NAME: dict[str, OptionDescriptor] = {d.name: d for d in OPTION_DESCRIPTORS}
_BY_KEY: dict[str, OptionDescriptor] = {d.key: d for d in OPTION_DESCRIPTORS}


def option_names() -> list[str]:
    """All option names in table order."""
    return [d.name for d in OPTION_DESCRIPTORS]


def option_groups() -> list[str]:
    """Distinct option groups in first-seen order."""
    return list(dict.fromkeys(d.group for d in OPTION_DESCRIPTORS))


class OptionSet:
    """Complete, defaulted collection of style settings for one format call.

    Every option of the descriptor table is always present. Values are read
    as attributes (``options.page_width``) or with :meth:`get`, and changed
    with :meth:`set` or the tolerant :meth:`load`.

    Not synchronized: share an instance read-only, or hand each concurrent
    caller its own :meth:`copy`.
    """

    __slots__ = ("_values",)

    def __init__(self, external_map: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = {d.name: d.default for d in OPTION_DESCRIPTORS}
        if external_map:
            self.load(external_map)

    @classmethod
    def defaults(cls) -> OptionSet:
        return cls()

    @classmethod
    def from_external_map(cls, external_map: Mapping[str, Any]) -> OptionSet:
        """Build a set from defaults plus wire-format overrides."""
        return cls(external_map)

    @staticmethod
    def descriptor(name: str) -> OptionDescriptor:
        try:
            return _BY_NAME[name]
        except KeyError:
            msg = f"Unknown formatter option: {name}"
            raise OptionError(msg) from None

    @staticmethod
    def key_for(name: str) -> str:
        return OptionSet.descriptor(name).key

    def load(self, external_map: Mapping[str, Any]) -> None:
        """Apply wire-format overrides.

        A malformed value resets that option to its own default; it never
        aborts the load or touches other options. Unknown keys are ignored.
        """
        for key, raw in external_map.items():
            descriptor = _BY_KEY.get(key)
            if descriptor is None:
                logger.debug("Ignoring unknown formatter option key %s", key)
                continue
            self._values[descriptor.name] = descriptor.decode(raw)

    def to_external_map(self) -> dict[str, str]:
        """Encode every option to its wire string."""
        return {d.key: d.encode(self._values[d.name]) for d in OPTION_DESCRIPTORS}

    def get(self, name: str) -> Any:
        self.descriptor(name)
        return self._values[name]

    def set(self, name: str, value: Any) -> None:
        descriptor = self.descriptor(name)
        if not descriptor.codec.accepts(value):
            msg = f"Invalid value {value!r} for {name}: expected {descriptor.codec.describe()}"
            raise OptionError(msg)
        self._values[name] = value

    def update(self, **values: Any) -> OptionSet:
        """Set several options at once and return ``self``."""
        for name, value in values.items():
            self.set(name, value)
        return self

    def copy(self) -> OptionSet:
        clone = OptionSet.__new__(OptionSet)
        clone._values = dict(self._values)
        return clone

    def diff(self, other: OptionSet) -> dict[str, tuple[Any, Any]]:
        """Options whose values differ, as ``name -> (mine, theirs)``."""
        return {
            d.name: (self._values[d.name], other._values[d.name])
            for d in OPTION_DESCRIPTORS
            if self._values[d.name] != other._values[d.name]
        }

    def changed(self) -> dict[str, Any]:
        """Options that differ from their compiled-in defaults."""
        return {
            d.name: self._values[d.name]
            for d in OPTION_DESCRIPTORS
            if self._values[d.name] != d.default
        }

    def items(self) -> Iterator[tuple[str, Any]]:
        for d in OPTION_DESCRIPTORS:
            yield d.name, self._values[d.name]

    def __getattr__(self, name: str) -> Any:
        if name in _BY_NAME:
            return self._values[name]
        msg = f"{type(self).__name__!r} object has no attribute {name!r}"
        raise AttributeError(msg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionSet):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        changed = self.changed()
        return f"OptionSet({len(changed)} changed of {len(self._values)})"


__all__ = [
    "KEY_PREFIX",
    "OPTION_DESCRIPTORS",
    "OptionError",
    "OptionSet",
    "option_groups",
    "option_names",
]
