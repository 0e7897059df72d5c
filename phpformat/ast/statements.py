"""Statement AST nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from phpformat.ast.base import ASTNode
from phpformat.ast.expressions import Expression, Name, Variable


@dataclass
class Statement(ASTNode):
    """Base class for all statements."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_statement(self)


@dataclass
class Block(Statement):
    """Statements between braces."""

    statements: list[ASTNode] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_block(self)


@dataclass
class ExpressionStatement(Statement):
    """Expression followed by a semicolon."""

    expression: Expression

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_expression_statement(self)


@dataclass
class EmptyStatement(Statement):
    """A lone semicolon."""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_empty_statement(self)


@dataclass
class EchoStatement(Statement):
    expressions: list[Expression] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_echo_statement(self)


@dataclass
class ReturnStatement(Statement):
    expression: Expression | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_return_statement(self)


@dataclass
class ThrowStatement(Statement):
    expression: Expression

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_throw_statement(self)


@dataclass
class IfStatement(Statement):
    """``if`` with an optional ``else``; an ``IfStatement`` as else branch is ``else if``."""

    condition: Expression
    then_statement: Statement
    else_statement: Statement | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_if_statement(self)


@dataclass
class WhileStatement(Statement):
    condition: Expression
    body: Statement

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_while_statement(self)


@dataclass
class DoStatement(Statement):
    body: Statement
    condition: Expression

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_do_statement(self)


@dataclass
class ForStatement(Statement):
    """Classic three-part ``for`` loop."""

    initializers: list[Expression] = field(default_factory=list)
    conditions: list[Expression] = field(default_factory=list)
    updaters: list[Expression] = field(default_factory=list)
    body: Statement | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_for_statement(self)


@dataclass
class ForeachStatement(Statement):
    """``foreach (expression as [key =>] value)``."""

    expression: Expression
    value: Expression
    key: Expression | None = None
    body: Statement | None = None
    by_ref: bool = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_foreach_statement(self)


@dataclass
class SwitchCase(ASTNode):
    """``case value:`` or, without a value, ``default:``."""

    value: Expression | None = None
    statements: list[ASTNode] = field(default_factory=list)

    @property
    def is_default(self) -> bool:
        return self.value is None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_switch_case(self)


@dataclass
class SwitchStatement(Statement):
    expression: Expression
    cases: list[SwitchCase] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_switch_statement(self)


@dataclass
class BreakStatement(Statement):
    levels: Expression | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_break_statement(self)


@dataclass
class ContinueStatement(Statement):
    levels: Expression | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_continue_statement(self)


@dataclass
class CatchClause(ASTNode):
    """``catch (Type1 | Type2 $variable) { ... }``."""

    types: list[Name]
    variable: Variable | None
    body: Block = field(default_factory=Block)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_catch_clause(self)


@dataclass
class TryStatement(Statement):
    body: Block
    catches: list[CatchClause] = field(default_factory=list)
    finally_block: Block | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_try_statement(self)


@dataclass
class VariableDeclarator(ASTNode):
    """One declared name with an optional initializer (``$a = 1`` or ``A = 1``)."""

    target: Expression
    initializer: Expression | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_variable_declarator(self)


@dataclass
class GlobalStatement(Statement):
    variables: list[Variable] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_global_statement(self)


@dataclass
class StaticStatement(Statement):
    """``static $a = 1, $b;`` inside a function body."""

    declarators: list[VariableDeclarator] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_static_statement(self)


@dataclass
class LabelStatement(Statement):
    name: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_label_statement(self)


@dataclass
class GotoStatement(Statement):
    label: str

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_goto_statement(self)
