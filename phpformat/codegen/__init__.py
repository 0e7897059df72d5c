"""Code formatting for PHP syntax trees."""

from phpformat.codegen.edits import FormattingProvider, compute_text_edits
from phpformat.codegen.formatter import CodeFormatter, FormatterError, format_tree

__all__ = [
    "CodeFormatter",
    "FormatterError",
    "FormattingProvider",
    "compute_text_edits",
    "format_tree",
]
