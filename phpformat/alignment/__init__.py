"""Alignment modes and the line-wrapping resolver."""

from phpformat.alignment.fragment import Fragment, Layout, LayoutContext, Placement, SubElement
from phpformat.alignment.mode import (
    COMPACT,
    COMPACT_FIRST_BREAK,
    NEXT_PER_LINE,
    NEXT_SHIFTED,
    NO_ALIGNMENT,
    ONE_PER_LINE,
    AlignmentMode,
    SplitStrategy,
)
from phpformat.alignment.resolver import (
    AlignmentResolver,
    continuation_column,
    fits,
    layout_text,
    needs_split,
    resolve,
)

__all__ = [
    "COMPACT",
    "COMPACT_FIRST_BREAK",
    "NEXT_PER_LINE",
    "NEXT_SHIFTED",
    "NO_ALIGNMENT",
    "ONE_PER_LINE",
    "AlignmentMode",
    "AlignmentResolver",
    "Fragment",
    "Layout",
    "LayoutContext",
    "Placement",
    "SplitStrategy",
    "SubElement",
    "continuation_column",
    "fits",
    "layout_text",
    "needs_split",
    "resolve",
]
