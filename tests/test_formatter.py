"""Tests for the code formatter."""

import pytest

from phpformat.alignment import ONE_PER_LINE
from phpformat.ast.expressions import Expression
from phpformat.builder import (
    BlockBuilder,
    ClassBuilder,
    ExpressionBuilder as E,
    MethodBuilder,
    PhpFileBuilder,
    StatementBuilder as S,
)
from phpformat.codegen import CodeFormatter, FormatterError, format_tree
from phpformat.options import BracePosition, LineSeparator, OptionSet, TabChar


def spaced(**values) -> OptionSet:
    """Options indenting with spaces, so expected text stays readable."""
    return OptionSet().update(tab_char=TabChar.SPACE, **values)


def php(*lines: str) -> str:
    return "\n".join(["<?php", *lines])


class TestExpressions:
    """Tests for expression formatting."""

    def test_function_call(self) -> None:
        """Test arguments separated by comma and space."""
        assert format_tree(E.call("foo", 1, 2, 3)) == "foo(1, 2, 3)"

    def test_empty_call(self) -> None:
        """Test empty parens with and without the between space."""
        assert format_tree(E.call("foo")) == "foo()"

        options = OptionSet().update(insert_space_between_empty_parens_in_method_invocation=True)
        assert format_tree(E.call("foo"), options) == "foo( )"

    def test_space_after_opening_paren(self) -> None:
        """Test inner paren spaces in invocations."""
        options = OptionSet().update(
            insert_space_after_opening_paren_in_method_invocation=True,
            insert_space_before_closing_paren_in_method_invocation=True,
        )
        assert format_tree(E.call("foo", "$a"), options) == "foo( $a )"

    def test_comma_spacing(self) -> None:
        """Test comma spaces follow the invocation options."""
        options = OptionSet().update(
            insert_space_before_comma_in_method_invocation_arguments=True,
            insert_space_after_comma_in_method_invocation_arguments=False,
        )
        assert format_tree(E.call("foo", "$a", "$b"), options) == "foo($a ,$b)"

    def test_method_chain(self) -> None:
        """Test selector chains."""
        chain = E.method_call(E.method_call("$a", "b"), "c", 1)
        assert format_tree(chain) == "$a->b()->c(1)"
        assert format_tree(E.prop("$obj", "field")) == "$obj->field"

    def test_static_members(self) -> None:
        """Test double colon access."""
        assert format_tree(E.static_call("Foo", "bar", "$a")) == "Foo::bar($a)"
        assert format_tree(E.const("Foo", "BAR")) == "Foo::BAR"

    def test_allocation(self) -> None:
        """Test new expressions."""
        assert format_tree(E.new("Point", "$x", "$y")) == "new Point($x, $y)"
        assert format_tree(E.new("Point")) == "new Point()"

    def test_operators(self) -> None:
        """Test operator spacing."""
        assert format_tree(E.assign("$a", E.binary("$b", "+", 1))) == "$a = $b + 1"
        assert format_tree(E.assign("$c", 4, "+=")) == "$c += 4"
        assert format_tree(E.concat("$a", "$b")) == "$a . $b"
        assert format_tree(E.post_increment("$i")) == "$i++"
        assert format_tree(E.pre_decrement("$i")) == "--$i"
        assert format_tree(E.not_("$done")) == "!$done"

    def test_keyword_operators_keep_spaces(self) -> None:
        """Test word operators stay separated even without operator spaces."""
        options = OptionSet().update(
            insert_space_before_binary_operator=False,
            insert_space_after_binary_operator=False,
        )
        assert format_tree(E.binary("$a", "+", "$b"), options) == "$a+$b"
        assert format_tree(E.binary("$a", "instanceof", "Foo"), options) == "$a instanceof Foo"

    def test_cast(self) -> None:
        """Test cast parens."""
        assert format_tree(E.cast("int", "$x")) == "(int) $x"

        options = OptionSet().update(insert_space_after_closing_paren_in_cast=False)
        assert format_tree(E.cast("int", "$x"), options) == "(int)$x"

    def test_conditional(self) -> None:
        """Test ternary and short ternary."""
        assert format_tree(E.ternary("$a", 1, 2)) == "$a ? 1 : 2"
        assert format_tree(E.elvis("$a", 2)) == "$a ?: 2"

    def test_array_access(self) -> None:
        """Test array reference and append forms."""
        assert format_tree(E.access("$list", 0)) == "$list[0]"
        assert format_tree(E.access("$list")) == "$list[]"


class TestArrays:
    """Tests for array initializers."""

    def test_long_and_short_forms(self) -> None:
        """Test both array syntaxes."""
        assert format_tree(E.array(1, 2, 3)) == "array(1, 2, 3)"
        assert format_tree(E.array(1, 2, short=True)) == "[1, 2]"

    def test_empty_array(self) -> None:
        """Test empty initializers."""
        assert format_tree(E.array()) == "array()"

        options = OptionSet().update(insert_space_between_empty_braces_in_array_initializer=True)
        assert format_tree(E.array(), options) == "array( )"

    def test_keyed_elements(self) -> None:
        """Test the double arrow."""
        array = E.assoc((E.string("a"), 1), short=True)
        assert format_tree(array) == "['a' => 1]"

    def test_filler_aligns_double_arrows(self) -> None:
        """Test keys padded to a common width, one element per line."""
        options = spaced(
            alignment_for_expressions_in_array_initializer=ONE_PER_LINE,
            insert_space_before_double_arrow_operator_with_filler=True,
        )
        array = E.assoc((E.string("a"), 1), (E.string("bbb"), 2))
        expected = "$x = array(\n        'a'   => 1,\n        'bbb' => 2)"
        assert format_tree(E.assign("$x", array), options) == expected

    def test_array_argument_fits(self) -> None:
        """Test array arguments stay inline when nothing splits."""
        assert format_tree(E.call("foo", E.array(1, 2))) == "foo(array(1, 2))"


class TestLineWrapping:
    """Tests for wrapping under the page width."""

    def test_one_per_line_arguments(self) -> None:
        """Test every argument on its own continuation line."""
        options = spaced(alignment_for_arguments_in_method_invocation=ONE_PER_LINE)
        assert format_tree(E.call("foo", "$a", "$b"), options) == "foo(\n        $a,\n        $b)"

    def test_compact_wraps_at_page_width(self) -> None:
        """Test compact wrapping breaks only where needed."""
        call = E.call("foo", "$alpha", "$beta", "$gamma")
        expected = "foo($alpha, $beta,\n        $gamma)"
        assert format_tree(call, spaced(page_width=20)) == expected

    def test_wrapped_line_uses_tabs(self) -> None:
        """Test continuation indentation with tab characters."""
        call = E.call("foo", "$alpha", "$beta", "$gamma")
        options = OptionSet().update(page_width=20)
        assert format_tree(call, options) == "foo($alpha, $beta,\n\t\t$gamma)"

    def test_wrap_before_binary_operator(self) -> None:
        """Test operators lead the continuation lines."""
        total = E.assign("$total", E.binary(E.binary("$alpha", "+", "$beta"), "+", "$gamma"))
        expected = "$total = $alpha\n        + $beta\n        + $gamma"
        assert format_tree(total, spaced(page_width=20)) == expected

    def test_wrap_after_binary_operator(self) -> None:
        """Test operators ending the wrapped lines."""
        total = E.assign("$total", E.binary(E.binary("$alpha", "+", "$beta"), "+", "$gamma"))
        options = spaced(page_width=20, wrap_before_binary_operator=False)
        assert format_tree(total, options) == "$total = $alpha +\n        $beta +\n        $gamma"

    def test_no_wrapping_when_fits(self) -> None:
        """Test short text is never split."""
        call = E.call("foo", "$a", "$b")
        assert format_tree(call, spaced(page_width=200)) == "foo($a, $b)"

    @pytest.mark.parametrize(
        ("wrap_outer", "lines"),
        [
            (
                True,
                [
                    "foo_function_name($first_argument,",
                    "        bar($alpha_alpha, $beta_beta,",
                    "                $gamma_gamma), $last);",
                ],
            ),
            (
                False,
                [
                    "foo_function_name($first_argument,",
                    "        bar($alpha_alpha,",
                    "        $beta_beta, $gamma_gamma),",
                    "        $last);",
                ],
            ),
        ],
    )
    def test_wrap_outer_expressions_when_nested(self, wrap_outer, lines) -> None:
        """Test a moved inner call is laid out again only when outer wrapping is on."""
        inner = E.call("bar", "$alpha_alpha", "$beta_beta", "$gamma_gamma")
        tree = PhpFileBuilder.from_statements(
            S.expr(E.call("foo_function_name", "$first_argument", inner, "$last")),
        )
        options = spaced(page_width=40, wrap_outer_expressions_when_nested=wrap_outer)
        first = format_tree(tree, options)
        assert first == php(*lines)
        assert format_tree(tree, options) == first


class TestStatements:
    """Tests for statement formatting."""

    def test_if_block(self) -> None:
        """Test block brace at end of line."""
        tree = PhpFileBuilder.from_statements(S.if_("$a", S.block(E.assign("$b", 1))))
        assert format_tree(tree, spaced()) == php("if ($a) {", "    $b = 1;", "}")

    def test_if_block_next_line(self) -> None:
        """Test block brace on its own line."""
        tree = PhpFileBuilder.from_statements(S.if_("$a", S.block(E.assign("$b", 1))))
        options = spaced(brace_position_for_block=BracePosition.NEXT_LINE)
        assert format_tree(tree, options) == php("if ($a)", "{", "    $b = 1;", "}")

    def test_if_block_next_line_shifted(self) -> None:
        """Test shifted braces indent the block one level."""
        tree = PhpFileBuilder.from_statements(S.if_("$a", S.block(E.assign("$b", 1))))
        options = spaced(brace_position_for_block=BracePosition.NEXT_LINE_SHIFTED)
        expected = php("if ($a)", "    {", "        $b = 1;", "    }")
        assert format_tree(tree, options) == expected

    def test_tab_indentation(self) -> None:
        """Test default indentation uses tabs."""
        tree = PhpFileBuilder.from_statements(S.if_("$a", S.block(S.return_(1))))
        assert format_tree(tree) == php("if ($a) {", "\treturn 1;", "}")

    def test_if_else(self) -> None:
        """Test else continues after the closing brace."""
        tree = PhpFileBuilder.from_statements(
            S.if_("$a", S.block(S.return_(1)), S.block(S.return_(2))),
        )
        expected = php("if ($a) {", "    return 1;", "} else {", "    return 2;", "}")
        assert format_tree(tree, spaced()) == expected

    def test_new_line_before_else(self) -> None:
        """Test else on its own line."""
        tree = PhpFileBuilder.from_statements(
            S.if_("$a", S.block(S.return_(1)), S.block(S.return_(2))),
        )
        options = spaced(insert_new_line_before_else_in_if_statement=True)
        expected = php("if ($a) {", "    return 1;", "}", "else {", "    return 2;", "}")
        assert format_tree(tree, options) == expected

    def test_compact_else_if(self) -> None:
        """Test else if chains stay on the closing brace line."""
        chain = S.if_(
            "$a",
            S.block(S.return_(1)),
            S.if_("$b", S.block(S.return_(2)), S.block(S.return_(3))),
        )
        expected = php(
            "if ($a) {",
            "    return 1;",
            "} else if ($b) {",
            "    return 2;",
            "} else {",
            "    return 3;",
            "}",
        )
        assert format_tree(PhpFileBuilder.from_statements(chain), spaced()) == expected

    def test_unbraced_then_statement(self) -> None:
        """Test a simple then statement indented on the next line."""
        tree = PhpFileBuilder.from_statements(S.if_("$a", S.return_(1)))
        assert format_tree(tree, spaced()) == php("if ($a)", "    return 1;")

    def test_keep_simple_if_on_one_line(self) -> None:
        """Test one-line if without braces."""
        tree = PhpFileBuilder.from_statements(S.if_("$a", S.return_(1)))
        options = spaced(keep_simple_if_on_one_line=True)
        assert format_tree(tree, options) == php("if ($a) return 1;")

    def test_keep_guardian_clause_on_one_line(self) -> None:
        """Test braced guard clause on one line."""
        tree = PhpFileBuilder.from_statements(S.if_("$a", S.block(S.return_())))
        options = spaced(keep_guardian_clause_on_one_line=True)
        assert format_tree(tree, options) == php("if ($a) { return; }")

    def test_switch(self) -> None:
        """Test cases at switch level with indented statements."""
        switch = S.switch(
            "$a",
            S.case(1, E.call("foo"), S.break_()),
            S.case(None, S.break_()),
        )
        expected = php(
            "switch ($a) {",
            "case 1:",
            "    foo();",
            "    break;",
            "default:",
            "    break;",
            "}",
        )
        assert format_tree(PhpFileBuilder.from_statements(switch), spaced()) == expected

    def test_switch_indented_cases(self) -> None:
        """Test cases indented from the switch."""
        switch = S.switch("$a", S.case(1, E.call("foo"), S.break_()))
        options = spaced(indent_switchstatements_compare_to_switch=True)
        expected = php("switch ($a) {", "    case 1:", "        foo();", "        break;", "}")
        assert format_tree(PhpFileBuilder.from_statements(switch), options) == expected

    def test_for_loops(self) -> None:
        """Test for headers and empty blocks."""
        counting = S.for_(
            [E.assign("$i", 0)],
            [E.binary("$i", "<", 10)],
            [E.post_increment("$i")],
            S.block(),
        )
        forever = S.for_([], [], [], S.block(S.break_()))
        expected = php(
            "for ($i = 0; $i < 10; $i++) {",
            "}",
            "for (;;) {",
            "    break;",
            "}",
        )
        assert format_tree(PhpFileBuilder.from_statements(counting, forever), spaced()) == expected

    def test_for_condition_commas_follow_init_options(self) -> None:
        """Test commas in the condition section use the initialization options."""
        loop = S.for_(
            [E.assign("$i", 0), E.assign("$j", 0)],
            ["$i", "$j"],
            [E.post_increment("$i"), E.post_increment("$j")],
            S.block(),
        )
        options = spaced(insert_space_after_comma_in_for_inits=False)
        header = format_tree(PhpFileBuilder.from_statements(loop), options).split("\n")[1]
        assert header == "for ($i = 0,$j = 0; $i,$j; $i++, $j++) {"

    def test_empty_block_on_one_line(self) -> None:
        """Test closing an empty block on the header line."""
        tree = PhpFileBuilder.from_statements(S.while_("$a", S.block()))
        options = spaced(insert_new_line_in_empty_block=False)
        assert format_tree(tree, options) == php("while ($a) {}")

    def test_foreach_with_key(self) -> None:
        """Test key and value in foreach."""
        loop = S.foreach("$map", "$v", S.block(S.echo("$v")), key="$k")
        expected = php("foreach ($map as $k => $v) {", "    echo $v;", "}")
        assert format_tree(PhpFileBuilder.from_statements(loop), spaced()) == expected

    def test_do_while(self) -> None:
        """Test while after the closing brace."""
        loop = S.do_while(S.block(E.call("foo")), "$x")
        expected = php("do {", "    foo();", "} while ($x);")
        assert format_tree(PhpFileBuilder.from_statements(loop), spaced()) == expected

    def test_empty_statement(self) -> None:
        """Test empty loop bodies."""
        tree = PhpFileBuilder.from_statements(S.while_("$a", S.empty()))
        assert format_tree(tree, spaced()) == php("while ($a)", "    ;")

        options = spaced(put_empty_statement_on_new_line=False)
        assert format_tree(tree, options) == php("while ($a);")

    def test_try_catch_finally(self) -> None:
        """Test catch and finally after closing braces."""
        statement = S.try_(
            [E.call("foo")],
            S.catch("Exception", "$e"),
            finally_=[E.call("bar")],
        )
        expected = php(
            "try {",
            "    foo();",
            "} catch (Exception $e) {",
            "} finally {",
            "    bar();",
            "}",
        )
        assert format_tree(PhpFileBuilder.from_statements(statement), spaced()) == expected

    def test_new_line_before_catch(self) -> None:
        """Test catch on its own line."""
        statement = S.try_([E.call("foo")], S.catch("Exception", "$e"))
        options = spaced(insert_new_line_before_catch_in_try_statement=True)
        expected = php("try {", "    foo();", "}", "catch (Exception $e) {", "}")
        assert format_tree(PhpFileBuilder.from_statements(statement), options) == expected

    def test_parenthesized_keyword_expressions(self) -> None:
        """Test the space between keywords and parenthesized operands."""
        tree = PhpFileBuilder.from_statements(S.echo(E.paren("$msg")), S.return_(E.paren("$o")))
        assert format_tree(tree, spaced()) == php("echo ($msg);", "return ($o);")

        options = spaced(
            insert_space_before_parenthesized_expression_in_echo=False,
            insert_space_before_parenthesized_expression_in_return=False,
        )
        assert format_tree(tree, options) == php("echo($msg);", "return($o);")

    def test_label_on_statement_line(self) -> None:
        """Test labels share the line of the next statement."""
        tree = PhpFileBuilder.from_statements(S.label("loop"), E.call("foo"))
        assert format_tree(tree, spaced()) == php("loop: foo();")

        options = spaced(insert_new_line_after_label=True)
        assert format_tree(tree, options) == php("loop:", "foo();")

    def test_comments(self) -> None:
        """Test comment indentation and first column comments."""
        body = BlockBuilder().add(S.comment("// note", first_column=True)).returns(1)
        tree = PhpFileBuilder.create().with_function(MethodBuilder("f").with_body(body)).build()
        expected = php("function f() {", "    // note", "    return 1;", "}")
        assert format_tree(tree, spaced()) == expected

        options = spaced(never_indent_line_comments_on_first_column=True)
        expected = php("function f() {", "// note", "    return 1;", "}")
        assert format_tree(tree, options) == expected


class TestDeclarations:
    """Tests for classes, methods and file structure."""

    def test_class_with_members(self) -> None:
        """Test a blank line between the field and method chunks."""
        declaration = (
            ClassBuilder("Foo")
            .with_field("$a", 1)
            .with_method(MethodBuilder("bar").public().with_statement(S.return_("$this")))
        )
        tree = PhpFileBuilder.create().with_class(declaration).build()
        expected = php(
            "class Foo {",
            "    private $a = 1;",
            "",
            "    public function bar() {",
            "        return $this;",
            "    }",
            "}",
        )
        assert format_tree(tree, spaced()) == expected

    def test_method_parameters(self) -> None:
        """Test parameter lists with types and defaults."""
        method = MethodBuilder("bar").public().with_param("$x", "int", 5).with_params("$y")
        tree = PhpFileBuilder.create().with_class(ClassBuilder("Foo").with_method(method)).build()
        expected = php(
            "class Foo {",
            "    public function bar(int $x = 5, $y) {",
            "    }",
            "}",
        )
        assert format_tree(tree, spaced()) == expected

    def test_abstract_method(self) -> None:
        """Test body-less methods end with a semicolon."""
        method = MethodBuilder("run").abstract().public()
        declaration = ClassBuilder("Job").abstract().with_method(method)
        tree = PhpFileBuilder.create().with_class(declaration).build()
        expected = php("abstract class Job {", "    abstract public function run();", "}")
        assert format_tree(tree, spaced()) == expected

    def test_empty_class(self) -> None:
        """Test empty type bodies."""
        tree = PhpFileBuilder.create().with_class(ClassBuilder("Foo")).build()
        assert format_tree(tree, spaced()) == php("class Foo {", "}")

        options = spaced(insert_new_line_in_empty_type_declaration=False)
        assert format_tree(tree, options) == php("class Foo {}")

    def test_class_header(self) -> None:
        """Test superclass and interfaces."""
        declaration = ClassBuilder("Foo").extends("Bar").implements("A", "B")
        tree = PhpFileBuilder.create().with_class(declaration).build()
        expected = php("class Foo extends Bar implements A, B {", "}")
        assert format_tree(tree, spaced()) == expected

    def test_type_declaration_brace_next_line(self) -> None:
        """Test type brace on its own line."""
        tree = PhpFileBuilder.create().with_class(ClassBuilder("Foo")).build()
        options = spaced(brace_position_for_type_declaration=BracePosition.NEXT_LINE)
        assert format_tree(tree, options) == php("class Foo", "{", "}")

    def test_blank_lines_between_types(self) -> None:
        """Test type declarations separated by blank lines."""
        tree = (
            PhpFileBuilder.create()
            .with_class(ClassBuilder("A"))
            .with_class(ClassBuilder("B"))
            .build()
        )
        assert format_tree(tree, spaced()) == php("class A {", "}", "", "class B {", "}")

        options = spaced(blank_lines_between_type_declarations=2)
        expected = php("class A {", "}", "", "", "class B {", "}")
        assert format_tree(tree, options) == expected

    def test_namespace_and_imports(self) -> None:
        """Test blank lines around the package and import sections."""
        tree = (
            PhpFileBuilder.create()
            .in_namespace("App")
            .with_use("Foo\\Bar")
            .with_class(ClassBuilder("Baz"))
            .build()
        )
        expected = php("namespace App;", "", "use Foo\\Bar;", "", "class Baz {", "}")
        assert format_tree(tree, spaced()) == expected


class TestOutput:
    """Tests for whole-output options."""

    def test_line_separator(self) -> None:
        """Test the configured line delimiter."""
        tree = PhpFileBuilder.from_statements(E.call("foo"))
        options = OptionSet().update(line_separator=LineSeparator.CRLF)
        assert format_tree(tree, options) == "<?php\r\nfoo();"

    def test_new_line_at_end_of_file(self) -> None:
        """Test the final line delimiter is optional."""
        tree = PhpFileBuilder.from_statements(E.call("foo"))
        assert not format_tree(tree).endswith("\n")

        options = OptionSet().update(insert_new_line_at_end_of_file_if_missing=True)
        assert format_tree(tree, options) == "<?php\nfoo();\n"

    def test_initial_indentation_level(self) -> None:
        """Test every statement shifted by the initial level."""
        tree = PhpFileBuilder.from_statements(E.call("foo"))
        options = spaced(initial_indentation_level=1)
        assert format_tree(tree, options) == php("    foo();")

    def test_indent_empty_lines(self) -> None:
        """Test blank lines inside a body carry indentation."""
        declaration = ClassBuilder("Foo").with_field("$a").with_method(MethodBuilder("bar"))
        tree = PhpFileBuilder.create().with_class(declaration).build()
        lines = format_tree(tree, spaced(indent_empty_lines=True)).split("\n")
        assert lines[3] == "    "

    def test_formatting_is_deterministic(self) -> None:
        """Test formatting the same tree twice gives equal text."""
        tree = PhpFileBuilder.from_statements(
            S.if_("$a", S.block(E.call("foo", "$alpha", "$beta", "$gamma"))),
        )
        options = spaced(page_width=24)
        formatter = CodeFormatter(options)
        first = formatter.format(tree)
        assert formatter.format(tree) == first
        assert CodeFormatter(options.copy()).format(tree) == first


def test_unknown_node_raises() -> None:
    """Test nodes without a formatting rule are rejected."""
    formatter = CodeFormatter()
    with pytest.raises(FormatterError):
        formatter.format(Expression())
    with pytest.raises(FormatterError):
        formatter.visit("not a node")


def test_defaults_when_options_omitted() -> None:
    """Test the formatter builds default options."""
    assert CodeFormatter().options == OptionSet()
