"""Tests for the whitespace decision table."""

from phpformat.options import OptionSet
from phpformat.options.descriptors import InsertCodec
from phpformat.whitespace import Token, WhitespaceContext, WhitespaceTable


class TestContexts:
    """Tests for the closed set of whitespace contexts."""

    def test_every_option_exists(self) -> None:
        """Test contexts only name registered insert options."""
        for context in WhitespaceContext:
            for name in context.option_names():
                descriptor = OptionSet.descriptor(name)
                assert isinstance(descriptor.codec, InsertCodec), name

    def test_contexts_are_distinct(self) -> None:
        """Test no context is an alias of another."""
        assert len(WhitespaceContext.__members__) == len(list(WhitespaceContext))
        labels = [context.label for context in WhitespaceContext]
        assert len(labels) == len(set(labels))

    def test_every_token_used(self) -> None:
        """Test each token kind takes part in some context."""
        used = {context.token for context in WhitespaceContext}
        assert used == set(Token)

    def test_label(self) -> None:
        """Test readable labels."""
        context = WhitespaceContext.COMMA_IN_METHOD_INVOCATION_ARGUMENTS
        assert context.label == "comma in method invocation arguments"
        assert context.option_names() == [
            "insert_space_before_comma_in_method_invocation_arguments",
            "insert_space_after_comma_in_method_invocation_arguments",
        ]

    def test_fixed_sides(self) -> None:
        """Test sides without an option carry a fixed decision."""
        context = WhitespaceContext.OPENING_PAREN_IN_CAST
        assert context.before is False
        assert context.option_names() == ["insert_space_after_opening_paren_in_cast"]


class TestWhitespaceTable:
    """Tests for whitespace decisions."""

    def test_default_decisions(self) -> None:
        """Test defaults for common tokens."""
        table = WhitespaceTable(OptionSet())
        assert table.around(WhitespaceContext.ASSIGNMENT_OPERATOR, "=") == " = "
        assert table.around(WhitespaceContext.COMMA_IN_METHOD_INVOCATION_ARGUMENTS, ",") == ", "
        assert table.around(WhitespaceContext.OPENING_PAREN_IN_IF, "(") == " ("
        assert table.around(WhitespaceContext.OPENING_PAREN_IN_METHOD_INVOCATION, "(") == "("

    def test_follows_options(self) -> None:
        """Test decisions read the current option values."""
        options = OptionSet()
        table = WhitespaceTable(options)
        options.set("insert_space_before_opening_paren_in_if", False)
        options.set("insert_space_after_opening_paren_in_if", True)
        assert table.around(WhitespaceContext.OPENING_PAREN_IN_IF, "(") == "( "

    def test_fixed_side_ignores_options(self) -> None:
        """Test fixed sides never change."""
        table = WhitespaceTable(OptionSet())
        assert not table.space_before(WhitespaceContext.OPENING_PAREN_IN_CAST)
        assert table.before(WhitespaceContext.OPENING_PAREN_IN_CAST, "(") == "("

    def test_decisions_cover_all_contexts(self) -> None:
        """Test the full decision map."""
        decisions = WhitespaceTable(OptionSet()).decisions()
        assert set(decisions) == set(WhitespaceContext)
        assert decisions[WhitespaceContext.BINARY_OPERATOR] == (True, True)
