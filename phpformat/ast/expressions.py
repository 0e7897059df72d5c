"""Expression AST nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from phpformat.ast.base import ASTNode

ASSIGNMENT_OPERATORS = frozenset(
    {"=", "+=", "-=", "*=", "/=", ".=", "%=", "**=", "&=", "|=", "^=", "<<=", ">>=", "??="},
)

# Word operators need surrounding spaces whatever the style says.
KEYWORD_OPERATORS = frozenset({"instanceof", "and", "or", "xor"})


@dataclass
class Expression(ASTNode):
    """Base class for all expressions."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_expression(self)


@dataclass
class Variable(Expression):
    """Variable (``$name``); ``name`` excludes the dollar sign."""

    name: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_variable(self)


@dataclass
class Name(Expression):
    """Bare or qualified name: constants, functions, classes."""

    name: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_name(self)


@dataclass
class Literal(Expression):
    """Scalar literal kept as its source text (``42``, ``'abc'``, ``true``)."""

    value: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_literal(self)


@dataclass
class ArrayElement(Expression):
    """Element of an array literal, optionally keyed (``key => value``)."""

    value: Expression
    key: Expression | None = None
    by_ref: bool = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_array_element(self)


@dataclass
class ArrayLiteral(Expression):
    """``array(...)`` or, with ``short``, ``[...]``."""

    elements: list[ArrayElement] = field(default_factory=list)
    short: bool = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_array_literal(self)


@dataclass
class ArrayAccess(Expression):
    """``$a[index]``; a missing index is the append form ``$a[]``."""

    target: Expression
    index: Expression | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_array_access(self)


@dataclass
class FunctionCall(Expression):
    """Call of a function by name or by expression."""

    function: Expression
    arguments: list[Expression] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_function_call(self)


@dataclass
class MethodCall(Expression):
    """``$target->method(args)``."""

    target: Expression
    method: str
    arguments: list[Expression] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_method_call(self)


@dataclass
class PropertyFetch(Expression):
    """``$target->name``."""

    target: Expression
    name: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_property_fetch(self)


@dataclass
class StaticCall(Expression):
    """``Class::method(args)``; ``parent::__construct`` is an explicit constructor call."""

    class_name: Expression
    method: str
    arguments: list[Expression] = field(default_factory=list)

    @property
    def is_constructor_call(self) -> bool:
        return (
            isinstance(self.class_name, Name)
            and self.class_name.name in ("parent", "self")
            and self.method == "__construct"
        )

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_static_call(self)


@dataclass
class ClassConstantFetch(Expression):
    """``Class::NAME`` or a static property ``Class::$name``."""

    class_name: Expression
    name: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_class_constant_fetch(self)


@dataclass
class NewExpression(Expression):
    """``new Class(args)``; ``arguments`` of ``None`` omits the parentheses."""

    class_name: Expression
    arguments: list[Expression] | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_new_expression(self)


@dataclass
class BinaryExpression(Expression):
    """Binary operation; the ``.`` operator is string concatenation."""

    left: Expression
    operator: str
    right: Expression

    @property
    def is_concat(self) -> bool:
        return self.operator == "."

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_binary_expression(self)


@dataclass
class UnaryExpression(Expression):
    """Unary operation (``!``, ``-``, ``+``, ``~``, ``@``, ``&``)."""

    operator: str
    operand: Expression

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_unary_expression(self)


@dataclass
class PrefixExpression(Expression):
    """``++$a`` or ``--$a``."""

    operator: str
    operand: Expression

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_prefix_expression(self)


@dataclass
class PostfixExpression(Expression):
    """``$a++`` or ``$a--``."""

    operand: Expression
    operator: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_postfix_expression(self)


@dataclass
class CastExpression(Expression):
    """``(type) operand``."""

    type_name: str
    operand: Expression

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_cast_expression(self)


@dataclass
class Assignment(Expression):
    """Assignment with ``=`` or a compound operator."""

    target: Expression
    operator: str
    value: Expression

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_assignment(self)


@dataclass
class ConditionalExpression(Expression):
    """``condition ? if_true : if_false``; a missing ``if_true`` is ``?:``."""

    condition: Expression
    if_true: Expression | None
    if_false: Expression

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_conditional_expression(self)


@dataclass
class ParenthesizedExpression(Expression):
    """Expression wrapped in parentheses."""

    expression: Expression

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_parenthesized_expression(self)
