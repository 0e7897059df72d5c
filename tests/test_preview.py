"""Tests for option groupings and preview snippets."""

from dataclasses import FrozenInstanceError

import pytest

from phpformat.codegen import format_tree
from phpformat.options import OptionSet, TabChar
from phpformat.preview import (
    SNIPPETS,
    context_options,
    get_snippet,
    snippets_for,
    tree_by_position,
    tree_by_syntax_element,
)
from phpformat.whitespace import WhitespaceContext


class TestGroupingsTree:
    """Tests for the option groupings tree."""

    def test_structure_by_element(self) -> None:
        """Test element, position and role levels."""
        tree = tree_by_syntax_element()
        leaf = tree.find("opening paren", "before", "if")
        assert leaf.is_leaf
        assert leaf.option == "insert_space_before_opening_paren_in_if"
        assert leaf.context is WhitespaceContext.OPENING_PAREN_IN_IF
        assert tree.path(leaf.index) == ["opening paren", "before", "if"]

    def test_paired_tokens_use_between(self) -> None:
        """Test empty pairs group their option under between."""
        leaf = tree_by_syntax_element().find("empty parens", "between", "method invocation")
        assert leaf.option == "insert_space_between_empty_parens_in_method_invocation"

    def test_structure_by_position(self) -> None:
        """Test position and element joined in one level."""
        leaf = tree_by_position().find("after comma", "array initializer")
        assert leaf.option == "insert_space_after_comma_in_array_initializer"

    def test_every_option_side_is_a_leaf(self) -> None:
        """Test both groupings hold one leaf per option-backed side."""
        expected = len(list(context_options()))
        assert len(tree_by_syntax_element().leaves()) == expected
        assert len(tree_by_position().leaves()) == expected

    def test_parents_and_children_agree(self) -> None:
        """Test the arena links."""
        tree = tree_by_syntax_element()
        assert len(tree) == len(tree.nodes)
        for node in tree.nodes:
            for child in tree.children(node.index):
                assert child.parent == node.index
        assert all(tree.node(index).parent is None for index in tree.roots)

    def test_trees_are_shared(self) -> None:
        """Test built trees are cached and immutable."""
        tree = tree_by_syntax_element()
        assert tree_by_syntax_element() is tree
        with pytest.raises(FrozenInstanceError):
            tree.nodes[0].label = "changed"

    def test_find_unknown(self) -> None:
        """Test lookups that match nothing."""
        tree = tree_by_syntax_element()
        with pytest.raises(KeyError):
            tree.find("opening paren", "sideways")
        with pytest.raises(KeyError):
            tree.find()


class TestCheckedState:
    """Tests for reading and writing checked state."""

    def test_leaf_state_follows_option(self) -> None:
        """Test a leaf is checked exactly when its option is on."""
        tree = tree_by_syntax_element()
        leaf = tree.find("opening paren", "before", "if")
        options = OptionSet()
        assert tree.is_checked(options, leaf.index)

        options.set("insert_space_before_opening_paren_in_if", False)
        assert not tree.is_checked(options, leaf.index)

    def test_checked_leaves(self) -> None:
        """Test the checked leaves of a group."""
        tree = tree_by_syntax_element()
        group = tree.find("opening paren", "before")
        labels = {leaf.label for leaf in tree.checked_leaves(OptionSet(), group.index)}
        assert {"if", "for", "while", "switch", "catch"} <= labels
        assert "method invocation" not in labels

    def test_group_checked_only_when_all_leaves_are(self) -> None:
        """Test group state and group-wide changes."""
        tree = tree_by_syntax_element()
        group = tree.find("opening paren", "after")
        options = OptionSet()
        assert not tree.is_checked(options, group.index)
        assert tree.checked_leaves(options, group.index) == []

        tree.set_checked(options, group.index, True)
        assert tree.is_checked(options, group.index)
        assert options.insert_space_after_opening_paren_in_if is True
        assert options.insert_space_after_opening_paren_in_method_invocation is True

        tree.set_checked(options, group.index, False)
        assert options.changed() == {}

    def test_trees_share_option_state(self) -> None:
        """Test both groupings read the same options."""
        options = OptionSet()
        leaf = tree_by_position().find("before opening paren", "if")
        tree_by_position().set_checked(options, leaf.index, False)
        element_leaf = tree_by_syntax_element().find("opening paren", "before", "if")
        assert not tree_by_syntax_element().is_checked(options, element_leaf.index)


class TestSnippets:
    """Tests for preview snippets."""

    @pytest.mark.parametrize("name", sorted(SNIPPETS))
    def test_every_snippet_formats(self, name: str) -> None:
        """Test each snippet formats under the default options."""
        text = format_tree(get_snippet(name).build())
        assert text.startswith("<?php\n")
        assert len(text.split("\n")) > 1

    def test_if_snippet(self) -> None:
        """Test the if snippet output."""
        options = OptionSet().update(tab_char=TabChar.SPACE)
        text = format_tree(get_snippet("if").build(), options)
        assert text == "\n".join(
            [
                "<?php",
                "if ($condition) {",
                "    return $foo;",
                "} else {",
                "    return $bar;",
                "}",
            ],
        )

    def test_snippet_reflects_options(self) -> None:
        """Test changing an option changes the preview."""
        snippet = get_snippet("if")
        options = OptionSet().update(insert_space_before_opening_paren_in_if=False)
        assert "if($condition)" in format_tree(snippet.build(), options)

    def test_unknown_snippet(self) -> None:
        """Test unknown names."""
        with pytest.raises(KeyError):
            get_snippet("nope")

    def test_snippets_for_context(self) -> None:
        """Test contexts map to the snippets showing them."""
        names = [snippet.name for snippet in snippets_for(WhitespaceContext.OPENING_PAREN_IN_IF)]
        assert "if" in names
        names = [snippet.name for snippet in snippets_for(WhitespaceContext.COLON_IN_CASE)]
        assert "switch" in names
