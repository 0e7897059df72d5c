"""Predefined formatter profiles."""

from __future__ import annotations

from phpformat.alignment.mode import COMPACT, NEXT_PER_LINE, ONE_PER_LINE
from phpformat.options.constants import BracePosition, TabChar
from phpformat.options.registry import OptionSet


class StylePresets:
    """Predefined option sets for common styles."""

    @staticmethod
    def default() -> OptionSet:
        """Built-in defaults."""
        return OptionSet()

    @staticmethod
    def compact() -> OptionSet:
        """Dense style: narrow indentation, fewer spaces and blank lines."""
        return OptionSet().update(
            tab_char=TabChar.SPACE,
            tab_size=2,
            indentation_size=2,
            continuation_indentation=1,
            continuation_indentation_for_array_initializer=1,
            page_width=120,
            insert_space_before_opening_paren_in_if=False,
            insert_space_before_opening_paren_in_for=False,
            insert_space_before_opening_paren_in_while=False,
            insert_space_before_opening_paren_in_switch=False,
            insert_space_before_opening_paren_in_catch=False,
            insert_space_before_concat_operator=False,
            insert_space_after_concat_operator=False,
            insert_new_line_in_empty_block=False,
            insert_new_line_in_empty_method_body=False,
            insert_new_line_in_empty_type_declaration=False,
            blank_lines_before_imports=0,
            blank_lines_after_imports=0,
            blank_lines_between_type_declarations=0,
            keep_guardian_clause_on_one_line=True,
            keep_simple_if_on_one_line=True,
            keep_empty_array_initializer_on_one_line=True,
        )

    @staticmethod
    def expanded() -> OptionSet:
        """Airy style: own-line braces, one element per line when splitting."""
        return OptionSet().update(
            tab_char=TabChar.SPACE,
            brace_position_for_block=BracePosition.NEXT_LINE,
            brace_position_for_method_declaration=BracePosition.NEXT_LINE,
            brace_position_for_constructor_declaration=BracePosition.NEXT_LINE,
            brace_position_for_type_declaration=BracePosition.NEXT_LINE,
            brace_position_for_switch=BracePosition.NEXT_LINE,
            alignment_for_arguments_in_method_invocation=NEXT_PER_LINE,
            alignment_for_parameters_in_method_declaration=ONE_PER_LINE,
            alignment_for_parameters_in_constructor_declaration=ONE_PER_LINE,
            alignment_for_expressions_in_array_initializer=ONE_PER_LINE,
            insert_new_line_after_opening_brace_in_array_initializer=True,
            insert_new_line_before_closing_brace_in_array_initializer=True,
            insert_new_line_before_else_in_if_statement=True,
            insert_new_line_before_catch_in_try_statement=True,
            insert_new_line_before_finally_in_try_statement=True,
            insert_new_line_at_end_of_file_if_missing=True,
            blank_lines_before_method=1,
            blank_lines_before_field=1,
            blank_lines_between_type_declarations=2,
        )

    @staticmethod
    def tabs_only() -> OptionSet:
        """Tabs for every indentation, including continuation lines."""
        return OptionSet().update(
            tab_char=TabChar.TAB,
            use_tabs_only_for_leading_indentations=True,
            alignment_for_binary_expression=COMPACT.with_modifiers(indent_by_one=True),
        )

    @classmethod
    def names(cls) -> list[str]:
        return ["default", "compact", "expanded", "tabs_only"]

    @classmethod
    def by_name(cls, name: str) -> OptionSet:
        """Look up a preset by name."""
        if name not in cls.names():
            msg = f"Unknown style preset: {name}"
            raise ValueError(msg)
        return getattr(cls, name)()
