"""Indentation width and leading whitespace."""

from __future__ import annotations

from typing import TYPE_CHECKING

from phpformat.options.constants import TabChar

if TYPE_CHECKING:
    from phpformat.options.registry import OptionSet


class IndentationPolicy:
    """Turns indentation levels and columns into leading whitespace.

    With ``tab_char`` set to ``space`` every column is a space. With ``tab``
    and ``mixed``, whole tab stops become tabs and the remainder spaces; the
    two differ in the width of one level (``tab_size`` versus
    ``indentation_size``). ``use_tabs_only_for_leading_indentations`` keeps
    alignment columns as spaces after the tab-indented part.
    """

    def __init__(self, options: OptionSet) -> None:
        self.options = options

    @property
    def tab_char(self) -> TabChar:
        return self.options.tab_char

    @property
    def tab_size(self) -> int:
        return self.options.tab_size

    @property
    def level_width(self) -> int:
        """Columns occupied by one indentation level."""
        if self.tab_char is TabChar.MIXED:
            return self.options.indentation_size
        return self.options.tab_size

    @property
    def initial_columns(self) -> int:
        return self.options.initial_indentation_level * self.level_width

    def indent(self, level: int) -> str:
        return self.indent_columns(level * self.level_width)

    def indent_columns(self, columns: int) -> str:
        if columns <= 0:
            return ""
        if self.tab_char is TabChar.SPACE or self.tab_size <= 0:
            return " " * columns
        tabs, rest = divmod(columns, self.tab_size)
        return "\t" * tabs + " " * rest

    def leading(self, indent_columns: int, alignment_columns: int = 0) -> str:
        """Whitespace for a line indented by ``indent_columns`` plus alignment."""
        if self.options.use_tabs_only_for_leading_indentations:
            return self.indent_columns(indent_columns) + " " * max(alignment_columns, 0)
        return self.indent_columns(indent_columns + alignment_columns)

    def continuation_columns(self, array_initializer: bool = False) -> int:
        """Columns added for wrapped continuation lines."""
        if array_initializer:
            levels = self.options.continuation_indentation_for_array_initializer
        else:
            levels = self.options.continuation_indentation
        return levels * self.level_width

    def visual_width(self, text: str) -> int:
        """Display width of ``text`` with tabs expanded to tab stops."""
        if "\t" not in text or self.tab_size <= 0:
            return len(text)
        return len(text.expandtabs(self.tab_size))
