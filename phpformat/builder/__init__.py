"""Builders for PHP syntax trees."""

from phpformat.builder.class_builder import ClassBuilder, MethodBuilder
from phpformat.builder.expression_builder import ExpressionBuilder, to_expression
from phpformat.builder.file_builder import PhpFileBuilder
from phpformat.builder.statement_builder import BlockBuilder, StatementBuilder, to_statement

__all__ = [
    "BlockBuilder",
    "ClassBuilder",
    "ExpressionBuilder",
    "MethodBuilder",
    "PhpFileBuilder",
    "StatementBuilder",
    "to_expression",
    "to_statement",
]
