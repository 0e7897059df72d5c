"""Wire-format vocabulary for formatter options."""

from __future__ import annotations

from enum import Enum

KEY_PREFIX = "phpformat."

# Whitespace and new-line toggles
INSERT = "insert"
DO_NOT_INSERT = "do not insert"

# Plain boolean toggles
TRUE = "true"
FALSE = "false"


class BracePosition(Enum):
    """Placement of an opening brace relative to its header line."""

    END_OF_LINE = "end_of_line"
    NEXT_LINE = "next_line"
    NEXT_LINE_SHIFTED = "next_line_shifted"
    NEXT_LINE_ON_WRAP = "next_line_on_wrap"


class TabChar(Enum):
    """Characters used for leading indentation."""

    TAB = "tab"
    SPACE = "space"
    MIXED = "mixed"


class LineSeparator(Enum):
    """Line delimiter written between output lines."""

    LF = "\n"
    CRLF = "\r\n"
    CR = "\r"
