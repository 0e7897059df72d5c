"""Closed set of whitespace contexts produced by the PHP grammar.

Each context pairs a token kind with its grammatical role and names the
option deciding the space before and after the token. A side that no style
option controls carries a fixed boolean instead.
"""

from __future__ import annotations

from enum import Enum


class Token(Enum):
    """Punctuation and operator kinds that take whitespace decisions."""

    COMMA = "comma"
    OPENING_PAREN = "opening paren"
    CLOSING_PAREN = "closing paren"
    EMPTY_PARENS = "empty parens"
    OPENING_BRACKET = "opening bracket"
    CLOSING_BRACKET = "closing bracket"
    EMPTY_BRACKETS = "empty brackets"
    OPENING_BRACE = "opening brace"
    CLOSING_BRACE = "closing brace"
    EMPTY_BRACES = "empty braces"
    COLON = "colon"
    QUESTION = "question mark"
    SEMICOLON = "semicolon"
    OPERATOR = "operator"
    ELLIPSIS = "ellipsis"
    PARENTHESIZED_EXPRESSION = "parenthesized expression"


Decision = str | bool


class WhitespaceContext(Enum):
    """A token kind in one grammatical role."""

    # Commas
    COMMA_IN_METHOD_INVOCATION_ARGUMENTS = (
        Token.COMMA,
        "method invocation arguments",
        "insert_space_before_comma_in_method_invocation_arguments",
        "insert_space_after_comma_in_method_invocation_arguments",
    )
    COMMA_IN_ALLOCATION_EXPRESSION = (
        Token.COMMA,
        "allocation expression arguments",
        "insert_space_before_comma_in_allocation_expression",
        "insert_space_after_comma_in_allocation_expression",
    )
    COMMA_IN_EXPLICIT_CONSTRUCTOR_CALL_ARGUMENTS = (
        Token.COMMA,
        "explicit constructor call arguments",
        "insert_space_before_comma_in_explicit_constructor_call_arguments",
        "insert_space_after_comma_in_explicit_constructor_call_arguments",
    )
    COMMA_IN_ARRAY_INITIALIZER = (
        Token.COMMA,
        "array initializer",
        "insert_space_before_comma_in_array_initializer",
        "insert_space_after_comma_in_array_initializer",
    )
    COMMA_IN_METHOD_DECLARATION_PARAMETERS = (
        Token.COMMA,
        "method declaration parameters",
        "insert_space_before_comma_in_method_declaration_parameters",
        "insert_space_after_comma_in_method_declaration_parameters",
    )
    COMMA_IN_CONSTRUCTOR_DECLARATION_PARAMETERS = (
        Token.COMMA,
        "constructor declaration parameters",
        "insert_space_before_comma_in_constructor_declaration_parameters",
        "insert_space_after_comma_in_constructor_declaration_parameters",
    )
    COMMA_IN_FOR_INITS = (
        Token.COMMA,
        "for initialization",
        "insert_space_before_comma_in_for_inits",
        "insert_space_after_comma_in_for_inits",
    )
    COMMA_IN_FOR_INCREMENTS = (
        Token.COMMA,
        "for increments",
        "insert_space_before_comma_in_for_increments",
        "insert_space_after_comma_in_for_increments",
    )
    COMMA_IN_MULTIPLE_FIELD_DECLARATIONS = (
        Token.COMMA,
        "multiple field declarations",
        "insert_space_before_comma_in_multiple_field_declarations",
        "insert_space_after_comma_in_multiple_field_declarations",
    )
    COMMA_IN_MULTIPLE_LOCAL_DECLARATIONS = (
        Token.COMMA,
        "multiple local declarations",
        "insert_space_before_comma_in_multiple_local_declarations",
        "insert_space_after_comma_in_multiple_local_declarations",
    )
    COMMA_IN_SUPERINTERFACES = (
        Token.COMMA,
        "implemented interfaces",
        "insert_space_before_comma_in_superinterfaces",
        "insert_space_after_comma_in_superinterfaces",
    )

    # Opening parentheses
    OPENING_PAREN_IN_METHOD_INVOCATION = (
        Token.OPENING_PAREN,
        "method invocation",
        "insert_space_before_opening_paren_in_method_invocation",
        "insert_space_after_opening_paren_in_method_invocation",
    )
    OPENING_PAREN_IN_METHOD_DECLARATION = (
        Token.OPENING_PAREN,
        "method declaration",
        "insert_space_before_opening_paren_in_method_declaration",
        "insert_space_after_opening_paren_in_method_declaration",
    )
    OPENING_PAREN_IN_CONSTRUCTOR_DECLARATION = (
        Token.OPENING_PAREN,
        "constructor declaration",
        "insert_space_before_opening_paren_in_constructor_declaration",
        "insert_space_after_opening_paren_in_constructor_declaration",
    )
    OPENING_PAREN_IN_IF = (
        Token.OPENING_PAREN,
        "if",
        "insert_space_before_opening_paren_in_if",
        "insert_space_after_opening_paren_in_if",
    )
    OPENING_PAREN_IN_FOR = (
        Token.OPENING_PAREN,
        "for",
        "insert_space_before_opening_paren_in_for",
        "insert_space_after_opening_paren_in_for",
    )
    OPENING_PAREN_IN_WHILE = (
        Token.OPENING_PAREN,
        "while",
        "insert_space_before_opening_paren_in_while",
        "insert_space_after_opening_paren_in_while",
    )
    OPENING_PAREN_IN_SWITCH = (
        Token.OPENING_PAREN,
        "switch",
        "insert_space_before_opening_paren_in_switch",
        "insert_space_after_opening_paren_in_switch",
    )
    OPENING_PAREN_IN_CATCH = (
        Token.OPENING_PAREN,
        "catch",
        "insert_space_before_opening_paren_in_catch",
        "insert_space_after_opening_paren_in_catch",
    )
    OPENING_PAREN_IN_PARENTHESIZED_EXPRESSION = (
        Token.OPENING_PAREN,
        "parenthesized expression",
        "insert_space_before_opening_paren_in_parenthesized_expression",
        "insert_space_after_opening_paren_in_parenthesized_expression",
    )
    OPENING_PAREN_IN_CAST = (
        Token.OPENING_PAREN,
        "cast",
        False,
        "insert_space_after_opening_paren_in_cast",
    )

    # Closing parentheses
    CLOSING_PAREN_IN_METHOD_INVOCATION = (
        Token.CLOSING_PAREN,
        "method invocation",
        "insert_space_before_closing_paren_in_method_invocation",
        False,
    )
    CLOSING_PAREN_IN_METHOD_DECLARATION = (
        Token.CLOSING_PAREN,
        "method declaration",
        "insert_space_before_closing_paren_in_method_declaration",
        False,
    )
    CLOSING_PAREN_IN_CONSTRUCTOR_DECLARATION = (
        Token.CLOSING_PAREN,
        "constructor declaration",
        "insert_space_before_closing_paren_in_constructor_declaration",
        False,
    )
    CLOSING_PAREN_IN_IF = (
        Token.CLOSING_PAREN,
        "if",
        "insert_space_before_closing_paren_in_if",
        False,
    )
    CLOSING_PAREN_IN_FOR = (
        Token.CLOSING_PAREN,
        "for",
        "insert_space_before_closing_paren_in_for",
        False,
    )
    CLOSING_PAREN_IN_WHILE = (
        Token.CLOSING_PAREN,
        "while",
        "insert_space_before_closing_paren_in_while",
        False,
    )
    CLOSING_PAREN_IN_SWITCH = (
        Token.CLOSING_PAREN,
        "switch",
        "insert_space_before_closing_paren_in_switch",
        False,
    )
    CLOSING_PAREN_IN_CATCH = (
        Token.CLOSING_PAREN,
        "catch",
        "insert_space_before_closing_paren_in_catch",
        False,
    )
    CLOSING_PAREN_IN_PARENTHESIZED_EXPRESSION = (
        Token.CLOSING_PAREN,
        "parenthesized expression",
        "insert_space_before_closing_paren_in_parenthesized_expression",
        False,
    )
    CLOSING_PAREN_IN_CAST = (
        Token.CLOSING_PAREN,
        "cast",
        "insert_space_before_closing_paren_in_cast",
        "insert_space_after_closing_paren_in_cast",
    )

    # Empty parentheses: the "after" side is the space between the pair.
    EMPTY_PARENS_IN_METHOD_INVOCATION = (
        Token.EMPTY_PARENS,
        "method invocation",
        False,
        "insert_space_between_empty_parens_in_method_invocation",
    )
    EMPTY_PARENS_IN_METHOD_DECLARATION = (
        Token.EMPTY_PARENS,
        "method declaration",
        False,
        "insert_space_between_empty_parens_in_method_declaration",
    )
    EMPTY_PARENS_IN_CONSTRUCTOR_DECLARATION = (
        Token.EMPTY_PARENS,
        "constructor declaration",
        False,
        "insert_space_between_empty_parens_in_constructor_declaration",
    )

    # Brackets
    OPENING_BRACKET_IN_ARRAY_REFERENCE = (
        Token.OPENING_BRACKET,
        "array reference",
        "insert_space_before_opening_bracket_in_array_reference",
        "insert_space_after_opening_bracket_in_array_reference",
    )
    CLOSING_BRACKET_IN_ARRAY_REFERENCE = (
        Token.CLOSING_BRACKET,
        "array reference",
        "insert_space_before_closing_bracket_in_array_reference",
        False,
    )
    OPENING_BRACKET_IN_ARRAY_ALLOCATION_EXPRESSION = (
        Token.OPENING_BRACKET,
        "array append",
        "insert_space_before_opening_bracket_in_array_allocation_expression",
        "insert_space_after_opening_bracket_in_array_allocation_expression",
    )
    CLOSING_BRACKET_IN_ARRAY_ALLOCATION_EXPRESSION = (
        Token.CLOSING_BRACKET,
        "array append",
        "insert_space_before_closing_bracket_in_array_allocation_expression",
        False,
    )
    EMPTY_BRACKETS_IN_ARRAY_ALLOCATION_EXPRESSION = (
        Token.EMPTY_BRACKETS,
        "array append",
        False,
        "insert_space_between_empty_brackets_in_array_allocation_expression",
    )

    # Braces
    OPENING_BRACE_IN_BLOCK = (
        Token.OPENING_BRACE,
        "block",
        "insert_space_before_opening_brace_in_block",
        False,
    )
    OPENING_BRACE_IN_TYPE_DECLARATION = (
        Token.OPENING_BRACE,
        "type declaration",
        "insert_space_before_opening_brace_in_type_declaration",
        False,
    )
    OPENING_BRACE_IN_METHOD_DECLARATION = (
        Token.OPENING_BRACE,
        "method declaration",
        "insert_space_before_opening_brace_in_method_declaration",
        False,
    )
    OPENING_BRACE_IN_CONSTRUCTOR_DECLARATION = (
        Token.OPENING_BRACE,
        "constructor declaration",
        "insert_space_before_opening_brace_in_constructor_declaration",
        False,
    )
    OPENING_BRACE_IN_NAMESPACE_DECLARATION = (
        Token.OPENING_BRACE,
        "namespace declaration",
        "insert_space_before_opening_brace_in_namespace_declaration",
        False,
    )
    OPENING_BRACE_IN_SWITCH = (
        Token.OPENING_BRACE,
        "switch",
        "insert_space_before_opening_brace_in_switch",
        False,
    )
    OPENING_BRACE_IN_ARRAY_INITIALIZER = (
        Token.OPENING_BRACE,
        "array initializer",
        "insert_space_before_opening_brace_in_array_initializer",
        "insert_space_after_opening_brace_in_array_initializer",
    )
    CLOSING_BRACE_IN_ARRAY_INITIALIZER = (
        Token.CLOSING_BRACE,
        "array initializer",
        "insert_space_before_closing_brace_in_array_initializer",
        False,
    )
    EMPTY_BRACES_IN_ARRAY_INITIALIZER = (
        Token.EMPTY_BRACES,
        "array initializer",
        False,
        "insert_space_between_empty_braces_in_array_initializer",
    )
    CLOSING_BRACE_IN_BLOCK = (
        Token.CLOSING_BRACE,
        "block",
        False,
        "insert_space_after_closing_brace_in_block",
    )

    # Colons and question marks
    COLON_IN_CONDITIONAL = (
        Token.COLON,
        "conditional",
        "insert_space_before_colon_in_conditional",
        "insert_space_after_colon_in_conditional",
    )
    COLON_IN_CASE = (
        Token.COLON,
        "case",
        "insert_space_before_colon_in_case",
        "insert_space_after_colon_in_case",
    )
    COLON_IN_DEFAULT = (
        Token.COLON,
        "default",
        "insert_space_before_colon_in_default",
        False,
    )
    COLON_IN_LABELED_STATEMENT = (
        Token.COLON,
        "label",
        "insert_space_before_colon_in_labeled_statement",
        "insert_space_after_colon_in_labeled_statement",
    )
    QUESTION_IN_CONDITIONAL = (
        Token.QUESTION,
        "conditional",
        "insert_space_before_question_in_conditional",
        "insert_space_after_question_in_conditional",
    )

    # Semicolons
    SEMICOLON = (
        Token.SEMICOLON,
        "statement",
        "insert_space_before_semicolon",
        False,
    )
    SEMICOLON_IN_FOR = (
        Token.SEMICOLON,
        "for",
        "insert_space_before_semicolon_in_for",
        "insert_space_after_semicolon_in_for",
    )

    # Operators
    ASSIGNMENT_OPERATOR = (
        Token.OPERATOR,
        "assignment",
        "insert_space_before_assignment_operator",
        "insert_space_after_assignment_operator",
    )
    BINARY_OPERATOR = (
        Token.OPERATOR,
        "binary",
        "insert_space_before_binary_operator",
        "insert_space_after_binary_operator",
    )
    CONCAT_OPERATOR = (
        Token.OPERATOR,
        "concatenation",
        "insert_space_before_concat_operator",
        "insert_space_after_concat_operator",
    )
    PREFIX_OPERATOR = (
        Token.OPERATOR,
        "prefix",
        "insert_space_before_prefix_operator",
        "insert_space_after_prefix_operator",
    )
    POSTFIX_OPERATOR = (
        Token.OPERATOR,
        "postfix",
        "insert_space_before_postfix_operator",
        "insert_space_after_postfix_operator",
    )
    UNARY_OPERATOR = (
        Token.OPERATOR,
        "unary",
        "insert_space_before_unary_operator",
        "insert_space_after_unary_operator",
    )
    DOUBLE_ARROW_OPERATOR = (
        Token.OPERATOR,
        "double arrow",
        "insert_space_before_double_arrow_operator",
        "insert_space_after_double_arrow_operator",
    )
    DOUBLE_COLON_OPERATOR = (
        Token.OPERATOR,
        "double colon",
        "insert_space_before_double_colon_operator",
        "insert_space_after_double_colon_operator",
    )
    OBJECT_OPERATOR = (
        Token.OPERATOR,
        "object operator",
        "insert_space_before_object_operator",
        "insert_space_after_object_operator",
    )
    ELLIPSIS = (
        Token.ELLIPSIS,
        "variadic parameter",
        "insert_space_before_ellipsis",
        "insert_space_after_ellipsis",
    )

    # Keyword followed by a parenthesized expression
    PARENTHESIZED_EXPRESSION_IN_RETURN = (
        Token.PARENTHESIZED_EXPRESSION,
        "return",
        "insert_space_before_parenthesized_expression_in_return",
        False,
    )
    PARENTHESIZED_EXPRESSION_IN_THROW = (
        Token.PARENTHESIZED_EXPRESSION,
        "throw",
        "insert_space_before_parenthesized_expression_in_throw",
        False,
    )
    PARENTHESIZED_EXPRESSION_IN_ECHO = (
        Token.PARENTHESIZED_EXPRESSION,
        "echo",
        "insert_space_before_parenthesized_expression_in_echo",
        False,
    )

    def __init__(self, token: Token, role: str, before: Decision, after: Decision) -> None:
        self.token = token
        self.role = role
        self.before = before
        self.after = after

    @property
    def label(self) -> str:
        return f"{self.token.value} in {self.role}"

    def option_names(self) -> list[str]:
        """Names of the options this context reads."""
        return [side for side in (self.before, self.after) if isinstance(side, str)]
