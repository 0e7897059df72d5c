"""Brace placement and indentation policy."""

from phpformat.policy.braces import BracePolicy, ConstructKind, IndentReference
from phpformat.policy.indentation import IndentationPolicy

__all__ = ["BracePolicy", "ConstructKind", "IndentReference", "IndentationPolicy"]
