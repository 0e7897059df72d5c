"""Whitespace decisions for token contexts, backed by an OptionSet."""

from __future__ import annotations

from typing import TYPE_CHECKING

from phpformat.whitespace.contexts import Decision, WhitespaceContext

if TYPE_CHECKING:
    from phpformat.options.registry import OptionSet


class WhitespaceTable:
    """Answers whether a space goes before or after a token in a context."""

    def __init__(self, options: OptionSet) -> None:
        self.options = options

    def _decide(self, decision: Decision) -> bool:
        if isinstance(decision, bool):
            return decision
        return bool(self.options.get(decision))

    def space_before(self, context: WhitespaceContext) -> bool:
        return self._decide(context.before)

    def space_after(self, context: WhitespaceContext) -> bool:
        return self._decide(context.after)

    def before(self, context: WhitespaceContext, text: str) -> str:
        """``text`` preceded by its configured space."""
        return (" " if self.space_before(context) else "") + text

    def after(self, context: WhitespaceContext, text: str) -> str:
        """``text`` followed by its configured space."""
        return text + (" " if self.space_after(context) else "")

    def around(self, context: WhitespaceContext, text: str) -> str:
        """``text`` with both configured spaces."""
        return self.after(context, self.before(context, text))

    def decisions(self) -> dict[WhitespaceContext, tuple[bool, bool]]:
        """Every context with its (before, after) decision."""
        return {
            context: (self.space_before(context), self.space_after(context))
            for context in WhitespaceContext
        }
