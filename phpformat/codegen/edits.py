"""Text edits turning a document into its formatted form."""

from __future__ import annotations

from difflib import SequenceMatcher
from typing import TYPE_CHECKING

from lsprotocol.types import Position, Range, TextEdit

from phpformat.codegen.formatter import CodeFormatter

if TYPE_CHECKING:
    from phpformat.ast.base import ASTNode
    from phpformat.options import OptionSet


def compute_text_edits(original: str, formatted: str) -> list[TextEdit]:
    """
    Compute the edits that rewrite ``original`` into ``formatted``.

    Only the changed line spans are replaced, so an editor keeps cursor
    positions and markers in untouched regions.

    Args:
        original: The document text as the editor holds it
        formatted: The formatted text

    Returns:
        List of text edits to apply, empty when nothing changed
    """
    if original == formatted:
        return []

    old_lines = original.splitlines(keepends=True)
    new_lines = formatted.splitlines(keepends=True)
    matcher = SequenceMatcher(a=old_lines, b=new_lines, autojunk=False)

    edits = []
    for tag, old_start, old_end, new_start, new_end in matcher.get_opcodes():
        if tag == "equal":
            continue
        edits.append(
            TextEdit(
                range=Range(
                    start=_position(old_lines, old_start),
                    end=_position(old_lines, old_end),
                ),
                new_text="".join(new_lines[new_start:new_end]),
            ),
        )
    return edits


def _position(lines: list[str], index: int) -> Position:
    """Position at the start of line ``index``, or the end of an unterminated last line."""
    if index == len(lines) and lines and not lines[-1].endswith(("\n", "\r")):
        return Position(line=index - 1, character=len(lines[-1]))
    return Position(line=index, character=0)


class FormattingProvider:
    """Provides document formatting as editor text edits."""

    def __init__(self, options: OptionSet | None = None) -> None:
        self.formatter = CodeFormatter(options)

    def format_document(self, text: str, tree: ASTNode) -> list[TextEdit]:
        """
        Format the document whose parsed form is ``tree``.

        Args:
            text: The current document text
            tree: The syntax tree parsed from ``text``

        Returns:
            List of text edits to apply
        """
        return compute_text_edits(text, self.formatter.format(tree))
