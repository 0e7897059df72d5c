"""Declaration AST nodes: namespaces, uses, types and their members."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from phpformat.ast.base import ASTNode
from phpformat.ast.expressions import Expression
from phpformat.ast.statements import Block, Statement, VariableDeclarator


@dataclass
class NamespaceDeclaration(Statement):
    """``namespace Name;`` or, with ``bracketed``, ``namespace Name { ... }``."""

    name: str | None
    statements: list[ASTNode] = field(default_factory=list)
    bracketed: bool = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_namespace_declaration(self)


@dataclass
class UseStatement(Statement):
    """``use A\\B, C\\D as E;``; aliases are written into ``names``."""

    names: list[str] = field(default_factory=list)
    kind: str | None = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_use_statement(self)


@dataclass
class Parameter(ASTNode):
    """Formal parameter of a function or method."""

    name: str
    type_hint: str | None = None
    default: Expression | None = None
    by_ref: bool = False
    variadic: bool = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_parameter(self)


@dataclass
class MethodDeclaration(Statement):
    """Function or method declaration.

    ``body`` is ``None`` for abstract and interface methods. A method named
    ``__construct`` is a constructor.
    """

    name: str
    parameters: list[Parameter] = field(default_factory=list)
    body: Block | None = None
    modifiers: list[str] = field(default_factory=list)
    return_type: str | None = None
    by_ref: bool = False

    @property
    def is_constructor(self) -> bool:
        return self.name.lower() == "__construct"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_method_declaration(self)


@dataclass
class FieldDeclaration(Statement):
    """``private $a = 1, $b;``."""

    modifiers: list[str] = field(default_factory=list)
    declarators: list[VariableDeclarator] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_field_declaration(self)


@dataclass
class ConstantDeclaration(Statement):
    """``const A = 1, B = 2;`` at file or class level."""

    declarators: list[VariableDeclarator] = field(default_factory=list)
    modifiers: list[str] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_constant_declaration(self)


@dataclass
class TraitUse(Statement):
    """``use TraitA, TraitB;`` inside a class body."""

    traits: list[str] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_trait_use(self)


@dataclass
class ClassDeclaration(Statement):
    """Class, interface or trait declaration."""

    name: str
    members: list[ASTNode] = field(default_factory=list)
    kind: str = "class"
    modifiers: list[str] = field(default_factory=list)
    superclass: str | None = None
    interfaces: list[str] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_class_declaration(self)
