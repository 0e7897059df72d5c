"""Base AST node classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from phpformat.ast.statements import Statement


@dataclass
class Location:
    """Source location information for AST nodes."""

    line: int
    column: int
    file: str | None = None


@dataclass
class ASTNode(ABC):
    """Base class for all AST nodes."""

    location: Location | None = field(default=None, init=False, compare=False)

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for the visitor pattern."""

    def children(self) -> list[ASTNode]:
        """Return child nodes."""
        children = []
        for f in fields(self):
            if f.name == "location":
                continue
            value = getattr(self, f.name)
            if isinstance(value, ASTNode):
                children.append(value)
            elif isinstance(value, list):
                children.extend(v for v in value if isinstance(v, ASTNode))
        return children

    def walk(self):
        """Yield this node and all its descendants, depth first."""
        yield self
        for child in self.children():
            yield from child.walk()


@dataclass
class Comment(ASTNode):
    """A comment standing on its own line between statements or members.

    ``first_column`` records that the comment started at column zero in the
    source, which the ``never_indent_*_comments_on_first_column`` options
    preserve.
    """

    text: str
    is_multiline: bool = False
    first_column: bool = False

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_comment(self)


@dataclass
class PhpFile(ASTNode):
    """Root node: one PHP file starting with an open tag."""

    statements: list[Statement] = field(default_factory=list)
    open_tag: str = "<?php"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_php_file(self)
