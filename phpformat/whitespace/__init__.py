"""Whitespace decision table."""

from phpformat.whitespace.contexts import Token, WhitespaceContext
from phpformat.whitespace.table import WhitespaceTable

__all__ = ["Token", "WhitespaceContext", "WhitespaceTable"]
