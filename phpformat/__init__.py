"""phpformat - A configurable pretty-printer for PHP syntax trees."""

from phpformat.alignment import AlignmentMode, AlignmentResolver, SplitStrategy
from phpformat.builder import (
    ClassBuilder,
    ExpressionBuilder,
    MethodBuilder,
    PhpFileBuilder,
    StatementBuilder,
)
from phpformat.codegen import CodeFormatter, FormatterError, compute_text_edits, format_tree
from phpformat.options import OptionError, OptionSet, StylePresets
from phpformat.version import PHPFORMAT_VERSION

__version__ = PHPFORMAT_VERSION

__all__ = [
    "AlignmentMode",
    "AlignmentResolver",
    "ClassBuilder",
    "CodeFormatter",
    "ExpressionBuilder",
    "FormatterError",
    "MethodBuilder",
    "OptionError",
    "OptionSet",
    "PhpFileBuilder",
    "SplitStrategy",
    "StatementBuilder",
    "StylePresets",
    "__version__",
    "compute_text_edits",
    "format_tree",
]
