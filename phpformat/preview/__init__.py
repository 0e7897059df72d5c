"""Option groupings and preview snippets for settings screens."""

from phpformat.preview.index import (
    OptionNode,
    OptionTree,
    Position,
    context_options,
    tree_by_position,
    tree_by_syntax_element,
)
from phpformat.preview.snippets import SNIPPETS, PreviewSnippet, get_snippet, snippets_for

__all__ = [
    "SNIPPETS",
    "OptionNode",
    "OptionTree",
    "Position",
    "PreviewSnippet",
    "context_options",
    "get_snippet",
    "snippets_for",
    "tree_by_position",
    "tree_by_syntax_element",
]
