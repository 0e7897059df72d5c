"""Fluent builder for PHP files."""

from typing import Self

from phpformat.ast.base import ASTNode, PhpFile
from phpformat.ast.declarations import ClassDeclaration, NamespaceDeclaration, UseStatement
from phpformat.builder.class_builder import ClassBuilder, MethodBuilder
from phpformat.builder.statement_builder import to_statement


class PhpFileBuilder:
    """Fluent builder for constructing PHP files."""

    def __init__(self) -> None:
        self._namespace: str | None = None
        self._uses: list[str] = []
        self._statements: list[ASTNode] = []

    def in_namespace(self, name: str) -> Self:
        """Put everything after a ``namespace Name;`` declaration."""
        self._namespace = name
        return self

    def with_use(self, name: str) -> Self:
        self._uses.append(name)
        return self

    def with_uses(self, *names: str) -> Self:
        self._uses.extend(names)
        return self

    def with_class(self, cls: ClassDeclaration | ClassBuilder) -> Self:
        if isinstance(cls, ClassBuilder):
            cls = cls.build()
        self._statements.append(cls)
        return self

    def with_function(self, function: MethodBuilder) -> Self:
        self._statements.append(function.build())
        return self

    def with_statement(self, statement) -> Self:
        self._statements.append(to_statement(statement))
        return self

    def with_statements(self, *statements) -> Self:
        for statement in statements:
            self.with_statement(statement)
        return self

    def build(self) -> PhpFile:
        """Build the PhpFile AST node."""
        statements: list[ASTNode] = []
        if self._namespace is not None:
            statements.append(NamespaceDeclaration(name=self._namespace))
        statements.extend(UseStatement(names=[name]) for name in self._uses)
        statements.extend(self._statements)
        return PhpFile(statements=statements)

    # Convenience static methods
    @staticmethod
    def create() -> "PhpFileBuilder":
        """Create a new file builder."""
        return PhpFileBuilder()

    @staticmethod
    def from_statements(*statements) -> PhpFile:
        """Create a PHP file from statements."""
        builder = PhpFileBuilder()
        builder.with_statements(*statements)
        return builder.build()
