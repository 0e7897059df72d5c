"""Sample code shown next to option groups in a settings screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from phpformat.ast.base import PhpFile
from phpformat.builder import (
    BlockBuilder,
    ClassBuilder,
    ExpressionBuilder as E,
    MethodBuilder,
    PhpFileBuilder,
    StatementBuilder as S,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from phpformat.whitespace import WhitespaceContext


@dataclass(frozen=True, slots=True)
class PreviewSnippet:
    """A named sample tree and the whitespace roles it illustrates."""

    name: str
    title: str
    roles: tuple[str, ...]
    factory: Callable[[], PhpFile]

    def build(self) -> PhpFile:
        return self.factory()

    def illustrates(self, context: WhitespaceContext) -> bool:
        return any(role in context.role for role in self.roles)


def _for_loops() -> PhpFile:
    return PhpFileBuilder.from_statements(
        S.for_(
            [E.assign("$i", 0), E.assign("$j", "$length")],
            [E.binary("$i", "<", "$length")],
            [E.post_increment("$i"), E.post_decrement("$j")],
            S.block(),
        ),
        S.for_([], [], [], S.block(S.break_())),
        S.foreach("$names", "$name", S.block()),
        S.foreach("$arr", "$elm", S.echo(E.concat("$elm", E.string("\\n", double_quoted=True)))),
    )


def _while_loops() -> PhpFile:
    return PhpFileBuilder.from_statements(
        S.while_("$condition", S.block()),
        S.do_while(S.block(), "$condition"),
    )


def _try_catch() -> PhpFile:
    parse = E.assign("$number", E.static_call("Integer", "parseInt", "$value"))
    return PhpFileBuilder.from_statements(
        S.try_([parse], S.catch("NumberFormatException", "$e")),
    )


def _if_else() -> PhpFile:
    return PhpFileBuilder.from_statements(
        S.if_("$condition", S.block(S.return_("$foo")), S.block(S.return_("$bar"))),
    )


def _switch() -> PhpFile:
    return PhpFileBuilder.from_statements(
        S.switch(
            "$number",
            S.case("RED", S.return_("GREEN")),
            S.case("GREEN", S.return_("BLUE")),
            S.case("BLUE", S.return_("RED")),
            S.case(None, S.return_("BLACK")),
        ),
    )


def _method_declarations() -> PhpFile:
    return (
        PhpFileBuilder.create()
        .with_class(
            ClassBuilder("Example")
            .with_method(MethodBuilder("__construct").public().with_params("$x"))
            .with_method(MethodBuilder("foo").public())
            .with_method(MethodBuilder("bar").public().with_params("$x", "$y")),
        )
        .build()
    )


def _arrays() -> PhpFile:
    releases = E.assoc(
        (E.string("helios", True), E.string("3.6", True)),
        (E.string("galileo", True), E.string("3.5", True)),
        (E.string("ganymede", True), E.string("3.4", True)),
    )
    return PhpFileBuilder.from_statements(
        E.assign("$array0", E.array()),
        E.assign("$array1", E.array(1, 2, 3)),
        E.assign(E.access("$array2"), 99),
        E.assign(E.access("$array3"), releases),
    )


def _array_references() -> PhpFile:
    return PhpFileBuilder.from_statements(
        E.access("$array", "$i"),
        E.access("$array", E.string("first")),
    )


def _calls() -> PhpFile:
    return PhpFileBuilder.from_statements(
        E.call("foo"),
        E.call("bar", "$x", "$y"),
        E.static_call("Foo", "bar", "$a"),
        E.method_call("$obj", "func"),
    )


def _allocations() -> PhpFile:
    return PhpFileBuilder.from_statements(
        E.assign("$str", E.new("String")),
        E.assign("$point", E.new("Point", "$x", "$y")),
    )


def _labels() -> PhpFile:
    return PhpFileBuilder.from_statements(
        S.label("loop"),
        S.for_(
            [E.assign("$i", 0)],
            [E.binary("$i", "<", "$length")],
            [E.post_increment("$i")],
            S.block(S.goto("loop")),
        ),
    )


def _semicolons() -> PhpFile:
    return PhpFileBuilder.from_statements(
        E.assign("$a", 4),
        E.call("foo"),
        E.call("bar", "$x", "$y"),
    )


def _conditional() -> PhpFile:
    return PhpFileBuilder.from_statements(
        E.assign("$value", E.ternary("$condition", "TRUE", "FALSE")),
    )


def _class_declaration() -> PhpFile:
    declaration = ClassBuilder("MyClass").implements("I1", "I2", "I3")
    return PhpFileBuilder.create().with_class(declaration).build()


def _operators() -> PhpFile:
    return PhpFileBuilder.from_statements(
        E.assign("$list", E.new("ArrayList")),
        E.assign("$a", E.binary(E.unary("-", 4), "+", E.unary("-", 9))),
        E.assign("$b", E.binary(E.post_increment("$a"), "/", E.pre_decrement("$number"))),
        E.assign("$c", 4, "+="),
        E.assign("$value", E.binary("true", "&&", "false")),
        E.assign("$e", E.concat(E.string("op:", True), "$cd")),
        E.assign("$f", E.const("Foo", "BAR")),
        E.assign("$g", E.prop("$obj", "field")),
    )


def _cast() -> PhpFile:
    return PhpFileBuilder.from_statements(
        E.assign("$s", E.paren(E.cast("string", "$object"))),
    )


def _multiple_locals() -> PhpFile:
    body = BlockBuilder().add(S.static(a1=None, b1=None, c1=None)).add(S.global_("$a", "$b", "$c"))
    return PhpFileBuilder.create().with_function(MethodBuilder("bar").with_body(body)).build()


def _multiple_fields() -> PhpFile:
    fields = ClassBuilder("Foo").with_fields({"$a": 0, "$b": 1, "$c": 2, "$d": 3}, visibility="var")
    return PhpFileBuilder.create().with_class(fields).build()


def _blocks() -> PhpFile:
    return PhpFileBuilder.from_statements(
        S.if_("true", S.block(S.return_(1)), S.block(S.return_(2))),
        S.foreach("$arr", "$elm", S.block(S.echo("$elm"))),
    )


def _parenthesized() -> PhpFile:
    inner = E.paren(E.binary(E.paren(E.binary("$b", "+", "$c")), "/", "$d"))
    product = E.binary(E.binary("$a", "*", inner), "*", E.paren(E.binary("$e", "+", "$f")))
    return PhpFileBuilder.from_statements(E.assign("$result", E.paren(product)))


def _return() -> PhpFile:
    return PhpFileBuilder.from_statements(S.return_(E.paren("$o")))


def _throw() -> PhpFile:
    return PhpFileBuilder.from_statements(S.throw(E.paren("$e")))


def _echo() -> PhpFile:
    return PhpFileBuilder.from_statements(
        S.echo(E.paren("$msg")),
        S.echo(E.string("done", double_quoted=True)),
    )


SNIPPETS: dict[str, PreviewSnippet] = {
    snippet.name: snippet
    for snippet in (
        PreviewSnippet("for", "For and foreach loops", ("for", "statement"), _for_loops),
        PreviewSnippet("while", "While and do-while loops", ("while",), _while_loops),
        PreviewSnippet("catch", "Try and catch", ("catch", "block"), _try_catch),
        PreviewSnippet("if", "If and else", ("if", "block"), _if_else),
        PreviewSnippet("switch", "Switch statement", ("switch", "case", "default"), _switch),
        PreviewSnippet(
            "method_declaration",
            "Method and constructor declarations",
            ("method declaration", "constructor declaration"),
            _method_declarations,
        ),
        PreviewSnippet(
            "array",
            "Array initializers",
            ("array initializer", "array append", "double arrow"),
            _arrays,
        ),
        PreviewSnippet(
            "array_reference",
            "Array references",
            ("array reference",),
            _array_references,
        ),
        PreviewSnippet(
            "method_call",
            "Function and method calls",
            ("method invocation", "object operator"),
            _calls,
        ),
        PreviewSnippet("allocation", "Object allocation", ("allocation",), _allocations),
        PreviewSnippet("label", "Labels", ("label",), _labels),
        PreviewSnippet("semicolon", "Semicolons", ("statement",), _semicolons),
        PreviewSnippet("conditional", "Conditional expression", ("conditional",), _conditional),
        PreviewSnippet(
            "class_declaration",
            "Class declaration",
            ("type declaration", "implemented interfaces"),
            _class_declaration,
        ),
        PreviewSnippet(
            "operators",
            "Operators",
            ("unary", "prefix", "postfix", "binary", "assignment", "concatenation", "double colon"),
            _operators,
        ),
        PreviewSnippet("cast", "Cast expression", ("cast",), _cast),
        PreviewSnippet(
            "multiple_locals",
            "Static and global declarations",
            ("local declarations",),
            _multiple_locals,
        ),
        PreviewSnippet(
            "multiple_fields",
            "Field declarations",
            ("field declarations",),
            _multiple_fields,
        ),
        PreviewSnippet("block", "Blocks", ("block",), _blocks),
        PreviewSnippet(
            "parenthesized_expression",
            "Parenthesized expressions",
            ("parenthesized expression",),
            _parenthesized,
        ),
        PreviewSnippet("return", "Return statement", ("return",), _return),
        PreviewSnippet("throw", "Throw statement", ("throw",), _throw),
        PreviewSnippet("echo", "Echo statement", ("echo",), _echo),
    )
}


def get_snippet(name: str) -> PreviewSnippet:
    try:
        return SNIPPETS[name]
    except KeyError:
        msg = f"Unknown preview snippet: {name}"
        raise KeyError(msg) from None


def snippets_for(context: WhitespaceContext) -> list[PreviewSnippet]:
    """Snippets that show the effect of ``context``'s options."""
    return [snippet for snippet in SNIPPETS.values() if snippet.illustrates(context)]
