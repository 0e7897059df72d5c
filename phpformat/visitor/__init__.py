"""Visitor base class for the PHP syntax tree."""

from phpformat.visitor.visitor import ASTVisitor

__all__ = ["ASTVisitor"]
