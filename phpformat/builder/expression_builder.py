"""Expression builder utilities."""

from __future__ import annotations

from typing import TypeAlias

from phpformat.ast.expressions import (
    ArrayAccess,
    ArrayElement,
    ArrayLiteral,
    Assignment,
    BinaryExpression,
    CastExpression,
    ClassConstantFetch,
    ConditionalExpression,
    Expression,
    FunctionCall,
    Literal,
    MethodCall,
    Name,
    NewExpression,
    ParenthesizedExpression,
    PostfixExpression,
    PrefixExpression,
    PropertyFetch,
    StaticCall,
    UnaryExpression,
    Variable,
)

ExprLike: TypeAlias = Expression | str | int | float | bool | None


def to_expression(value: ExprLike) -> Expression:
    """Coerce a Python value into an expression.

    Strings starting with ``$`` become variables and other strings become
    names; numbers, booleans and ``None`` become literals. Use
    :meth:`ExpressionBuilder.string` for quoted PHP strings.
    """
    if isinstance(value, Expression):
        return value
    if value is None:
        return Literal(value="null")
    if isinstance(value, bool):
        return Literal(value="true" if value else "false")
    if isinstance(value, int | float):
        return Literal(value=repr(value))
    if value.startswith("$"):
        return Variable(name=value[1:])
    return Name(name=value)


def _args(arguments: tuple[ExprLike, ...]) -> list[Expression]:
    return [to_expression(argument) for argument in arguments]


class ExpressionBuilder:
    """Static helper methods for building expressions."""

    @staticmethod
    def var(name: str) -> Variable:
        """Create variable; a leading ``$`` is optional."""
        return Variable(name=name.removeprefix("$"))

    @staticmethod
    def name(name: str) -> Name:
        return Name(name=name)

    @staticmethod
    def literal(text: str) -> Literal:
        """Create literal from its source text."""
        return Literal(value=text)

    @staticmethod
    def integer(value: int) -> Literal:
        return Literal(value=str(value))

    @staticmethod
    def string(value: str, double_quoted: bool = False) -> Literal:
        """Create quoted string literal."""
        if double_quoted:
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            return Literal(value=f'"{escaped}"')
        escaped = value.replace("\\", "\\\\").replace("'", "\\'")
        return Literal(value=f"'{escaped}'")

    @staticmethod
    def true() -> Literal:
        return Literal(value="true")

    @staticmethod
    def false() -> Literal:
        return Literal(value="false")

    @staticmethod
    def null() -> Literal:
        return Literal(value="null")

    @staticmethod
    def call(function: str | Expression, *arguments: ExprLike) -> FunctionCall:
        """Create function call."""
        callee = Name(name=function) if isinstance(function, str) else function
        return FunctionCall(function=callee, arguments=_args(arguments))

    @staticmethod
    def method_call(target: ExprLike, method: str, *arguments: ExprLike) -> MethodCall:
        """Create ``$target->method(...)``."""
        return MethodCall(target=to_expression(target), method=method, arguments=_args(arguments))

    @staticmethod
    def static_call(class_name: str, method: str, *arguments: ExprLike) -> StaticCall:
        return StaticCall(
            class_name=Name(name=class_name),
            method=method,
            arguments=_args(arguments),
        )

    @staticmethod
    def parent_construct(*arguments: ExprLike) -> StaticCall:
        """Create ``parent::__construct(...)``."""
        return StaticCall(
            class_name=Name(name="parent"),
            method="__construct",
            arguments=_args(arguments),
        )

    @staticmethod
    def prop(target: ExprLike, name: str) -> PropertyFetch:
        return PropertyFetch(target=to_expression(target), name=name)

    @staticmethod
    def const(class_name: str, name: str) -> ClassConstantFetch:
        """Create ``Class::NAME``."""
        return ClassConstantFetch(class_name=Name(name=class_name), name=name)

    @staticmethod
    def new(class_name: str, *arguments: ExprLike) -> NewExpression:
        return NewExpression(class_name=Name(name=class_name), arguments=_args(arguments))

    @staticmethod
    def element(value: ExprLike, key: ExprLike = None, by_ref: bool = False) -> ArrayElement:
        """Create array element; ``key`` of ``None`` means no key."""
        return ArrayElement(
            value=to_expression(value),
            key=None if key is None else to_expression(key),
            by_ref=by_ref,
        )

    @staticmethod
    def array(*values: ExprLike | ArrayElement, short: bool = False) -> ArrayLiteral:
        """Create array literal from values or prepared elements."""
        elements = [
            value if isinstance(value, ArrayElement) else ArrayElement(value=to_expression(value))
            for value in values
        ]
        return ArrayLiteral(elements=elements, short=short)

    @staticmethod
    def assoc(*pairs: tuple[ExprLike, ExprLike], short: bool = False) -> ArrayLiteral:
        """Create keyed array literal from ``(key, value)`` pairs, in order."""
        elements = [
            ArrayElement(value=to_expression(value), key=to_expression(key))
            for key, value in pairs
        ]
        return ArrayLiteral(elements=elements, short=short)

    @staticmethod
    def access(target: ExprLike, index: ExprLike = None) -> ArrayAccess:
        """Create ``$a[index]``; without an index, the append form ``$a[]``."""
        return ArrayAccess(
            target=to_expression(target),
            index=None if index is None else to_expression(index),
        )

    @staticmethod
    def binary(left: ExprLike, operator: str, right: ExprLike) -> BinaryExpression:
        return BinaryExpression(
            left=to_expression(left),
            operator=operator,
            right=to_expression(right),
        )

    @staticmethod
    def concat(*parts: ExprLike) -> Expression:
        """Left-nested concatenation of all parts."""
        result = to_expression(parts[0])
        for part in parts[1:]:
            result = BinaryExpression(left=result, operator=".", right=to_expression(part))
        return result

    @staticmethod
    def assign(target: ExprLike, value: ExprLike, operator: str = "=") -> Assignment:
        return Assignment(
            target=to_expression(target),
            operator=operator,
            value=to_expression(value),
        )

    @staticmethod
    def ternary(
        condition: ExprLike,
        if_true: ExprLike,
        if_false: ExprLike,
    ) -> ConditionalExpression:
        return ConditionalExpression(
            condition=to_expression(condition),
            if_true=to_expression(if_true),
            if_false=to_expression(if_false),
        )

    @staticmethod
    def elvis(condition: ExprLike, if_false: ExprLike) -> ConditionalExpression:
        """Create short ternary ``condition ?: if_false``."""
        return ConditionalExpression(
            condition=to_expression(condition),
            if_true=None,
            if_false=to_expression(if_false),
        )

    @staticmethod
    def paren(expression: ExprLike) -> ParenthesizedExpression:
        return ParenthesizedExpression(expression=to_expression(expression))

    @staticmethod
    def cast(type_name: str, operand: ExprLike) -> CastExpression:
        return CastExpression(type_name=type_name, operand=to_expression(operand))

    @staticmethod
    def not_(operand: ExprLike) -> UnaryExpression:
        return UnaryExpression(operator="!", operand=to_expression(operand))

    @staticmethod
    def unary(operator: str, operand: ExprLike) -> UnaryExpression:
        return UnaryExpression(operator=operator, operand=to_expression(operand))

    @staticmethod
    def pre_increment(operand: ExprLike) -> PrefixExpression:
        return PrefixExpression(operator="++", operand=to_expression(operand))

    @staticmethod
    def pre_decrement(operand: ExprLike) -> PrefixExpression:
        return PrefixExpression(operator="--", operand=to_expression(operand))

    @staticmethod
    def post_increment(operand: ExprLike) -> PostfixExpression:
        return PostfixExpression(operand=to_expression(operand), operator="++")

    @staticmethod
    def post_decrement(operand: ExprLike) -> PostfixExpression:
        return PostfixExpression(operand=to_expression(operand), operator="--")
