"""Option groupings tree for settings screens.

The whitespace options are arranged as a tree, either by syntax element
(``opening paren`` -> ``before`` -> ``if``) or by position first
(``before opening paren`` -> ``if``). The tree is an immutable arena: nodes
live in one tuple and refer to their parent and children by index, so a
built tree can be shared freely. Checked state is never stored in the tree;
it is read from and written to the :class:`OptionSet` passed in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cache
from typing import TYPE_CHECKING

from phpformat.whitespace import Token, WhitespaceContext

if TYPE_CHECKING:
    from collections.abc import Iterator

    from phpformat.options import OptionSet


class Position(Enum):
    """Where the space goes relative to the token."""

    BEFORE = "before"
    AFTER = "after"
    BETWEEN = "between"


_PAIRED_TOKENS = (Token.EMPTY_PARENS, Token.EMPTY_BRACKETS, Token.EMPTY_BRACES)


@dataclass(frozen=True, slots=True)
class OptionNode:
    """One node of the groupings tree.

    Leaves carry the option they toggle and the context it belongs to; inner
    nodes only group.
    """

    index: int
    label: str
    parent: int | None = None
    children: tuple[int, ...] = ()
    option: str | None = None
    context: WhitespaceContext | None = None

    @property
    def is_leaf(self) -> bool:
        return self.option is not None


def context_options() -> Iterator[tuple[WhitespaceContext, Position, str]]:
    """Every option-backed side of every whitespace context."""
    for context in WhitespaceContext:
        if isinstance(context.before, str):
            yield context, Position.BEFORE, context.before
        if isinstance(context.after, str):
            position = Position.BETWEEN if context.token in _PAIRED_TOKENS else Position.AFTER
            yield context, position, context.after


class _ArenaBuilder:
    """Mutable staging area; frozen into an :class:`OptionTree` by :meth:`build`."""

    def __init__(self) -> None:
        self.labels: list[str] = []
        self.parents: list[int | None] = []
        self.children: list[list[int]] = []
        self.leaves: dict[int, tuple[str, WhitespaceContext]] = {}
        self.groups: dict[tuple[int | None, str], int] = {}

    def group(self, parent: int | None, label: str) -> int:
        key = (parent, label)
        if key not in self.groups:
            self.groups[key] = self._add(parent, label)
        return self.groups[key]

    def leaf(self, parent: int, context: WhitespaceContext, option: str) -> int:
        index = self._add(parent, context.role)
        self.leaves[index] = (option, context)
        return index

    def _add(self, parent: int | None, label: str) -> int:
        index = len(self.labels)
        self.labels.append(label)
        self.parents.append(parent)
        self.children.append([])
        if parent is not None:
            self.children[parent].append(index)
        return index

    def build(self) -> OptionTree:
        nodes = []
        for index, label in enumerate(self.labels):
            option, context = self.leaves.get(index, (None, None))
            nodes.append(
                OptionNode(
                    index=index,
                    label=label,
                    parent=self.parents[index],
                    children=tuple(self.children[index]),
                    option=option,
                    context=context,
                ),
            )
        return OptionTree(tuple(nodes))


class OptionTree:
    """Immutable arena of option grouping nodes."""

    def __init__(self, nodes: tuple[OptionNode, ...]) -> None:
        self.nodes = nodes
        self.roots = tuple(node.index for node in nodes if node.parent is None)

    def __len__(self) -> int:
        return len(self.nodes)

    def node(self, index: int) -> OptionNode:
        return self.nodes[index]

    def children(self, index: int) -> list[OptionNode]:
        return [self.nodes[child] for child in self.nodes[index].children]

    def path(self, index: int) -> list[str]:
        """Labels from the root down to ``index``."""
        labels = []
        current: int | None = index
        while current is not None:
            node = self.nodes[current]
            labels.append(node.label)
            current = node.parent
        return labels[::-1]

    def leaves(self, index: int | None = None) -> list[OptionNode]:
        """Leaves under ``index``, or the whole tree, in depth-first order."""
        stack = [index] if index is not None else list(reversed(self.roots))
        found = []
        while stack:
            node = self.nodes[stack.pop()]
            if node.is_leaf:
                found.append(node)
            stack.extend(reversed(node.children))
        return found

    def is_checked(self, options: OptionSet, index: int) -> bool:
        """A leaf is checked when its option is on; a group when all its leaves are."""
        leaves = self.leaves(index)
        return bool(leaves) and all(options.get(leaf.option) for leaf in leaves)

    def checked_leaves(self, options: OptionSet, index: int | None = None) -> list[OptionNode]:
        return [leaf for leaf in self.leaves(index) if options.get(leaf.option)]

    def set_checked(self, options: OptionSet, index: int, checked: bool) -> None:
        """Turn the option of a leaf, or of every leaf under a group, on or off."""
        for leaf in self.leaves(index):
            options.set(leaf.option, checked)

    def find(self, *labels: str) -> OptionNode:
        """Node reached by following ``labels`` from a root."""
        candidates = self.roots
        node = None
        for label in labels:
            node = next((self.nodes[i] for i in candidates if self.nodes[i].label == label), None)
            if node is None:
                msg = f"No option group {' / '.join(labels)}"
                raise KeyError(msg)
            candidates = node.children
        if node is None:
            msg = "No labels given"
            raise KeyError(msg)
        return node


@cache
def tree_by_syntax_element() -> OptionTree:
    """Syntax element, then position, then role."""
    builder = _ArenaBuilder()
    for token in Token:
        for context, position, option in context_options():
            if context.token is not token:
                continue
            element = builder.group(None, token.value)
            builder.leaf(builder.group(element, position.value), context, option)
    return builder.build()


@cache
def tree_by_position() -> OptionTree:
    """Position and syntax element together, then role."""
    builder = _ArenaBuilder()
    for position in Position:
        for token in Token:
            for context, side, option in context_options():
                if side is position and context.token is token:
                    group = builder.group(None, f"{position.value} {token.value}")
                    builder.leaf(group, context, option)
    return builder.build()
