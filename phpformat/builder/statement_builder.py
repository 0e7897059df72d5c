"""Statement builders: static helpers and a fluent block builder."""

from __future__ import annotations

from typing import Self

from phpformat.ast.base import ASTNode, Comment
from phpformat.ast.expressions import Expression, Name, Variable
from phpformat.ast.statements import (
    Block,
    BreakStatement,
    CatchClause,
    ContinueStatement,
    DoStatement,
    EchoStatement,
    EmptyStatement,
    ExpressionStatement,
    ForeachStatement,
    ForStatement,
    GlobalStatement,
    GotoStatement,
    IfStatement,
    LabelStatement,
    ReturnStatement,
    Statement,
    StaticStatement,
    SwitchCase,
    SwitchStatement,
    ThrowStatement,
    TryStatement,
    VariableDeclarator,
    WhileStatement,
)
from phpformat.builder.expression_builder import ExprLike, to_expression


def to_statement(value: Statement | Expression | BlockBuilder) -> Statement:
    """Wrap bare expressions in an expression statement."""
    if isinstance(value, BlockBuilder):
        return value.build()
    if isinstance(value, Expression):
        return ExpressionStatement(expression=value)
    return value


def _block(body: Block | BlockBuilder | list | None) -> Block:
    if body is None:
        return Block()
    if isinstance(body, Block):
        return body
    if isinstance(body, BlockBuilder):
        return body.build()
    return Block(statements=[to_statement(statement) for statement in body])


class StatementBuilder:
    """Static helper methods for building statements."""

    @staticmethod
    def expr(expression: ExprLike) -> ExpressionStatement:
        return ExpressionStatement(expression=to_expression(expression))

    @staticmethod
    def echo(*expressions: ExprLike) -> EchoStatement:
        return EchoStatement(expressions=[to_expression(e) for e in expressions])

    @staticmethod
    def return_(expression: ExprLike | None = None) -> ReturnStatement:
        return ReturnStatement(expression=None if expression is None else to_expression(expression))

    @staticmethod
    def throw(expression: ExprLike) -> ThrowStatement:
        return ThrowStatement(expression=to_expression(expression))

    @staticmethod
    def block(*statements: Statement | Expression) -> Block:
        return Block(statements=[to_statement(statement) for statement in statements])

    @staticmethod
    def if_(
        condition: ExprLike,
        then: Statement | Expression | BlockBuilder,
        otherwise: Statement | Expression | BlockBuilder | None = None,
    ) -> IfStatement:
        """Create if statement; pass another ``IfStatement`` as ``otherwise`` for ``else if``."""
        return IfStatement(
            condition=to_expression(condition),
            then_statement=to_statement(then),
            else_statement=None if otherwise is None else to_statement(otherwise),
        )

    @staticmethod
    def while_(condition: ExprLike, body: Statement | Expression | BlockBuilder) -> WhileStatement:
        return WhileStatement(condition=to_expression(condition), body=to_statement(body))

    @staticmethod
    def do_while(body: Statement | Expression | BlockBuilder, condition: ExprLike) -> DoStatement:
        return DoStatement(body=to_statement(body), condition=to_expression(condition))

    @staticmethod
    def for_(
        initializers: list[ExprLike],
        conditions: list[ExprLike],
        updaters: list[ExprLike],
        body: Statement | Expression | BlockBuilder | None = None,
    ) -> ForStatement:
        return ForStatement(
            initializers=[to_expression(e) for e in initializers],
            conditions=[to_expression(e) for e in conditions],
            updaters=[to_expression(e) for e in updaters],
            body=None if body is None else to_statement(body),
        )

    @staticmethod
    def foreach(
        expression: ExprLike,
        value: ExprLike,
        body: Statement | Expression | BlockBuilder,
        key: ExprLike | None = None,
        by_ref: bool = False,
    ) -> ForeachStatement:
        return ForeachStatement(
            expression=to_expression(expression),
            value=to_expression(value),
            key=None if key is None else to_expression(key),
            body=to_statement(body),
            by_ref=by_ref,
        )

    @staticmethod
    def case(value: ExprLike | None, *statements: Statement | Expression) -> SwitchCase:
        """Create ``case``; a ``value`` of ``None`` creates ``default``."""
        return SwitchCase(
            value=None if value is None else to_expression(value),
            statements=[to_statement(statement) for statement in statements],
        )

    @staticmethod
    def switch(expression: ExprLike, *cases: SwitchCase) -> SwitchStatement:
        return SwitchStatement(expression=to_expression(expression), cases=list(cases))

    @staticmethod
    def break_(levels: int | None = None) -> BreakStatement:
        return BreakStatement(levels=None if levels is None else to_expression(levels))

    @staticmethod
    def continue_(levels: int | None = None) -> ContinueStatement:
        return ContinueStatement(levels=None if levels is None else to_expression(levels))

    @staticmethod
    def catch(
        types: str | list[str],
        variable: str | None,
        body: Block | BlockBuilder | list | None = None,
    ) -> CatchClause:
        names = [types] if isinstance(types, str) else types
        return CatchClause(
            types=[Name(name=name) for name in names],
            variable=None if variable is None else Variable(name=variable.removeprefix("$")),
            body=_block(body),
        )

    @staticmethod
    def try_(
        body: Block | BlockBuilder | list,
        *catches: CatchClause,
        finally_: Block | BlockBuilder | list | None = None,
    ) -> TryStatement:
        return TryStatement(
            body=_block(body),
            catches=list(catches),
            finally_block=None if finally_ is None else _block(finally_),
        )

    @staticmethod
    def global_(*names: str) -> GlobalStatement:
        return GlobalStatement(variables=[Variable(name=name.removeprefix("$")) for name in names])

    @staticmethod
    def static(**declarations: ExprLike) -> StaticStatement:
        """Create ``static $a = ..., $b;``; pass ``None`` for no initializer."""
        return StaticStatement(
            declarators=[
                VariableDeclarator(
                    target=Variable(name=name),
                    initializer=None if value is None else to_expression(value),
                )
                for name, value in declarations.items()
            ],
        )

    @staticmethod
    def label(name: str) -> LabelStatement:
        return LabelStatement(name=name)

    @staticmethod
    def goto(label: str) -> GotoStatement:
        return GotoStatement(label=label)

    @staticmethod
    def empty() -> EmptyStatement:
        return EmptyStatement()

    @staticmethod
    def comment(text: str, first_column: bool = False) -> Comment:
        """Create a line or block comment; block comments start with ``/*``."""
        return Comment(text=text, is_multiline=text.startswith("/*"), first_column=first_column)


class BlockBuilder:
    """Fluent builder for statement blocks."""

    def __init__(self) -> None:
        self._statements: list[ASTNode] = []

    def add(self, statement: Statement | Expression | Comment) -> Self:
        """Add a statement; bare expressions become expression statements."""
        if isinstance(statement, Comment):
            self._statements.append(statement)
        else:
            self._statements.append(to_statement(statement))
        return self

    def expr(self, expression: ExprLike) -> Self:
        return self.add(StatementBuilder.expr(expression))

    def echo(self, *expressions: ExprLike) -> Self:
        return self.add(StatementBuilder.echo(*expressions))

    def returns(self, expression: ExprLike | None = None) -> Self:
        return self.add(StatementBuilder.return_(expression))

    def throws(self, expression: ExprLike) -> Self:
        return self.add(StatementBuilder.throw(expression))

    def comment(self, text: str) -> Self:
        return self.add(StatementBuilder.comment(text))

    def build(self) -> Block:
        """Build the Block AST node."""
        return Block(statements=list(self._statements))

    @staticmethod
    def create() -> BlockBuilder:
        return BlockBuilder()
