"""Fluent builders for classes and their members."""

from __future__ import annotations

from typing import Self

from phpformat.ast.base import ASTNode
from phpformat.ast.declarations import (
    ClassDeclaration,
    ConstantDeclaration,
    FieldDeclaration,
    MethodDeclaration,
    Parameter,
    TraitUse,
)
from phpformat.ast.expressions import Name, Variable
from phpformat.ast.statements import Block, Statement, VariableDeclarator
from phpformat.builder.expression_builder import ExprLike, to_expression
from phpformat.builder.statement_builder import BlockBuilder, to_statement


class MethodBuilder:
    """Fluent builder for functions and methods."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._modifiers: list[str] = []
        self._parameters: list[Parameter] = []
        self._statements: list[ASTNode] = []
        self._return_type: str | None = None
        self._abstract = False

    def with_modifier(self, modifier: str) -> Self:
        self._modifiers.append(modifier)
        return self

    def public(self) -> Self:
        return self.with_modifier("public")

    def protected(self) -> Self:
        return self.with_modifier("protected")

    def private(self) -> Self:
        return self.with_modifier("private")

    def static(self) -> Self:
        return self.with_modifier("static")

    def abstract(self) -> Self:
        """Mark abstract; the method gets no body."""
        self._abstract = True
        return self.with_modifier("abstract")

    def without_body(self) -> Self:
        """Declare without body, as interface methods are."""
        self._abstract = True
        return self

    def with_param(
        self,
        name: str,
        type_hint: str | None = None,
        default: ExprLike = None,
        by_ref: bool = False,
        variadic: bool = False,
        has_default: bool = False,
    ) -> Self:
        """Add parameter; pass ``has_default`` to give it a ``null`` default."""
        value = None
        if default is not None or has_default:
            value = to_expression(default)
        self._parameters.append(
            Parameter(
                name=name.removeprefix("$"),
                type_hint=type_hint,
                default=value,
                by_ref=by_ref,
                variadic=variadic,
            ),
        )
        return self

    def with_params(self, *names: str) -> Self:
        for name in names:
            self.with_param(name)
        return self

    def returns(self, type_name: str) -> Self:
        self._return_type = type_name
        return self

    def with_statement(self, statement) -> Self:
        self._statements.append(to_statement(statement))
        return self

    def with_body(self, body: Block | BlockBuilder) -> Self:
        block = body.build() if isinstance(body, BlockBuilder) else body
        self._statements.extend(block.statements)
        return self

    def build(self) -> MethodDeclaration:
        """Build the MethodDeclaration AST node."""
        return MethodDeclaration(
            name=self.name,
            parameters=list(self._parameters),
            body=None if self._abstract else Block(statements=list(self._statements)),
            modifiers=list(self._modifiers),
            return_type=self._return_type,
        )


class ClassBuilder:
    """Fluent builder for class, interface and trait declarations."""

    def __init__(self, name: str, kind: str = "class") -> None:
        self.name = name
        self.kind = kind
        self._modifiers: list[str] = []
        self._superclass: str | None = None
        self._interfaces: list[str] = []
        self._members: list[ASTNode] = []

    def abstract(self) -> Self:
        self._modifiers.append("abstract")
        return self

    def final(self) -> Self:
        self._modifiers.append("final")
        return self

    def extends(self, superclass: str) -> Self:
        self._superclass = superclass
        return self

    def implements(self, *interfaces: str) -> Self:
        self._interfaces.extend(interfaces)
        return self

    def with_trait(self, *traits: str) -> Self:
        self._members.append(TraitUse(traits=list(traits)))
        return self

    def with_constant(self, name: str, value: ExprLike) -> Self:
        self._members.append(
            ConstantDeclaration(
                declarators=[
                    VariableDeclarator(target=Name(name=name), initializer=to_expression(value)),
                ],
            ),
        )
        return self

    def with_field(
        self,
        name: str,
        value: ExprLike = None,
        visibility: str = "private",
        static: bool = False,
    ) -> Self:
        """Add a single property declaration."""
        return self.with_fields({name: value}, visibility=visibility, static=static)

    def with_fields(
        self,
        declarations: dict[str, ExprLike],
        visibility: str = "private",
        static: bool = False,
    ) -> Self:
        """Add one declaration of several properties (``private $a, $b;``)."""
        modifiers = [visibility, "static"] if static else [visibility]
        self._members.append(
            FieldDeclaration(
                modifiers=modifiers,
                declarators=[
                    VariableDeclarator(
                        target=Variable(name=name.removeprefix("$")),
                        initializer=None if value is None else to_expression(value),
                    )
                    for name, value in declarations.items()
                ],
            ),
        )
        return self

    def with_method(self, method: MethodDeclaration | MethodBuilder) -> Self:
        if isinstance(method, MethodBuilder):
            method = method.build()
        self._members.append(method)
        return self

    def with_member(self, member: Statement) -> Self:
        self._members.append(member)
        return self

    def build(self) -> ClassDeclaration:
        """Build the ClassDeclaration AST node."""
        return ClassDeclaration(
            name=self.name,
            members=list(self._members),
            kind=self.kind,
            modifiers=list(self._modifiers),
            superclass=self._superclass,
            interfaces=list(self._interfaces),
        )

    @staticmethod
    def interface(name: str) -> ClassBuilder:
        return ClassBuilder(name, kind="interface")

    @staticmethod
    def trait(name: str) -> ClassBuilder:
        return ClassBuilder(name, kind="trait")
