"""PHP code formatter: renders a syntax tree under an OptionSet."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from phpformat.alignment import (
    NO_ALIGNMENT,
    AlignmentMode,
    AlignmentResolver,
    Fragment,
    LayoutContext,
    SplitStrategy,
    SubElement,
)
from phpformat.ast.base import ASTNode, Comment, PhpFile
from phpformat.ast.declarations import (
    ClassDeclaration,
    ConstantDeclaration,
    FieldDeclaration,
    MethodDeclaration,
    NamespaceDeclaration,
    Parameter,
    TraitUse,
    UseStatement,
)
from phpformat.ast.expressions import (
    KEYWORD_OPERATORS,
    ArrayAccess,
    ArrayElement,
    ArrayLiteral,
    Assignment,
    BinaryExpression,
    CastExpression,
    ClassConstantFetch,
    ConditionalExpression,
    Expression,
    FunctionCall,
    Literal,
    MethodCall,
    Name,
    NewExpression,
    ParenthesizedExpression,
    PostfixExpression,
    PrefixExpression,
    PropertyFetch,
    StaticCall,
    UnaryExpression,
    Variable,
)
from phpformat.ast.statements import (
    Block,
    BreakStatement,
    CatchClause,
    ContinueStatement,
    DoStatement,
    EchoStatement,
    EmptyStatement,
    ExpressionStatement,
    ForeachStatement,
    ForStatement,
    GlobalStatement,
    GotoStatement,
    IfStatement,
    LabelStatement,
    ReturnStatement,
    Statement,
    StaticStatement,
    SwitchCase,
    SwitchStatement,
    ThrowStatement,
    TryStatement,
    VariableDeclarator,
    WhileStatement,
)
from phpformat.options import OptionSet
from phpformat.policy import BracePolicy, ConstructKind, IndentationPolicy
from phpformat.visitor import ASTVisitor
from phpformat.whitespace import WhitespaceContext as WS
from phpformat.whitespace import WhitespaceTable

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class FormatterError(Exception):
    """Raised when the formatter meets a node it cannot render."""


def _text(text: str) -> SubElement:
    return SubElement(text=text)


def _wrap(prefix: str, element: SubElement, suffix: str = "") -> SubElement:
    """Surround an element with fixed text, keeping it wrappable."""
    if element.nested is None:
        return _text(prefix + element.text + suffix)
    inner = element.nested
    folded = replace(inner, opening=prefix + inner.opening, closing=inner.closing + suffix)
    return SubElement(nested=folded, nested_mode=element.nested_mode)


def _join(*parts: SubElement | str) -> SubElement:
    """Concatenate pieces without any break opportunity between them."""
    merged: list[SubElement] = []
    for part in parts:
        element = _text(part) if isinstance(part, str) else part
        if element.nested is None and not element.text:
            continue
        if merged and merged[-1].nested is None and element.nested is None:
            merged[-1] = _text(merged[-1].text + element.text)
        else:
            merged.append(element)
    if not merged:
        return _text("")
    nested = [element for element in merged if element.nested is not None]
    if len(nested) <= 1 and len(merged) <= 3:
        if not nested:
            return merged[0]
        index = merged.index(nested[0])
        prefix = merged[index - 1].text if index > 0 else ""
        suffix = merged[index + 1].text if index + 1 < len(merged) else ""
        return _wrap(prefix, nested[0], suffix)
    return SubElement(nested=Fragment(elements=tuple(merged)), nested_mode=NO_ALIGNMENT)


def _group(
    elements: list[SubElement],
    mode: AlignmentMode,
    opening: str = "",
    closing: str = "",
    **flags: Any,
) -> SubElement:
    fragment = Fragment(elements=tuple(elements), opening=opening, closing=closing, **flags)
    return SubElement(nested=fragment, nested_mode=mode)


class CodeFormatter(ASTVisitor[SubElement | None]):
    """Format PHP syntax trees.

    Expression visitors return a :class:`SubElement` describing the
    expression and its break opportunities; statement visitors write lines.
    Every wrappable construct is laid out by the alignment resolver once its
    starting column is known.
    """

    def __init__(self, options: OptionSet | None = None) -> None:
        self.options = options if options is not None else OptionSet()
        self.ws = WhitespaceTable(self.options)
        self.braces = BracePolicy(self.options)
        self.indentation = IndentationPolicy(self.options)
        self.resolver = AlignmentResolver()
        self._reset()

    def _reset(self) -> None:
        self._lines: list[str] = []
        self.level = 0
        self._pending_blank = 0
        self._carry = ""

    def format(self, node: ASTNode) -> str:
        """Format a file, statement or expression and return the text."""
        self._reset()
        logger.debug("Formatting %s", type(node).__name__)
        result = self.visit(node)
        if isinstance(result, SubElement):
            self._write_element(result)
        return self._finish()

    def generic_visit(self, node: Any) -> SubElement | None:
        msg = f"Cannot format node of type {type(node).__name__}"
        raise FormatterError(msg)

    # Output

    def _column(self) -> int:
        return self.indentation.initial_columns + self.level * self.indentation.level_width

    def _layout_context(self, base: int) -> LayoutContext:
        return LayoutContext(
            page_width=self.options.page_width,
            base_indent=base,
            indent_width=self.indentation.level_width,
            continuation_indentation=self.options.continuation_indentation,
            wrap_outer_expressions_when_nested=self.options.wrap_outer_expressions_when_nested,
        )

    def _indenter(self, base: int) -> Callable[[int], str]:
        def indent(column: int) -> str:
            return self.indentation.leading(min(column, base), max(column - base, 0))

        return indent

    def _start_column(self, base: int) -> int:
        _, newline, tail = self._carry.rpartition("\n")
        if newline:
            return self.indentation.visual_width(tail)
        return base + len(tail)

    def _render(self, element: SubElement) -> tuple[str, bool]:
        """Lay out ``element`` on the next line; return its text and whether it wrapped."""
        if element.nested is None:
            return element.text, "\n" in element.text
        base = self._column()
        column = self._start_column(base)
        context = self._layout_context(base)
        fragment = self.resolver.settle(element.nested, column, context)
        layout = self.resolver.resolve(fragment, element.nested_mode, column, context)
        return self.resolver.render(fragment, layout, self._indenter(base)), layout.is_wrapped

    def _blank(self) -> str:
        if self.options.indent_empty_lines:
            return self.indentation.indent_columns(self._column())
        return ""

    def _request_blank_lines(self, count: int) -> None:
        self._pending_blank = max(self._pending_blank, count)

    def _discard_blank_lines(self) -> None:
        self._pending_blank = 0

    def _flush_blank_lines(self) -> None:
        if self._lines and not self._carry:
            self._lines.extend(self._blank() for _ in range(self._pending_blank))
        self._pending_blank = 0

    def _writeline(self, text: str) -> None:
        """Write one logical line at the current level."""
        self._flush_blank_lines()
        prefix = self.indentation.indent_columns(self._column())
        self._lines.append(prefix + self._carry + text)
        self._carry = ""

    def _append(self, text: str) -> None:
        self._lines[-1] += text

    def _resume_last_line(self, glue: str) -> None:
        """Make the next written line continue the last one."""
        last = self._lines.pop()
        head, newline, tail = last.rpartition("\n")
        if newline:
            self._lines.append(head)
        self._carry = tail.lstrip(" \t") + glue

    def _flush_carry(self) -> None:
        if self._carry:
            self._writeline("")

    def _write_element(self, element: SubElement, suffix: str = "") -> bool:
        text, wrapped = self._render(element)
        self._writeline(text + suffix)
        return wrapped

    def _finish(self) -> str:
        self._flush_carry()
        lines = "\n".join(self._lines).split("\n")
        cleaned = []
        for line in lines:
            if line.strip():
                cleaned.append(line.rstrip(" \t"))
            else:
                cleaned.append(line if self.options.indent_empty_lines else "")
        separator = self.options.line_separator.value
        text = separator.join(cleaned)
        if self.options.insert_new_line_at_end_of_file_if_missing and not text.endswith(separator):
            text += separator
        return text

    # Token helpers

    def _glue(self, context: WS) -> str:
        return " " if self.ws.space_before(context) else ""

    def _semicolon(self) -> str:
        return self.ws.before(WS.SEMICOLON, ";")

    def _comma_list(self, items: list[SubElement], context: WS) -> list[SubElement]:
        separator = self.ws.around(context, ",")
        suffix = self.ws.before(context, ",")
        return [
            item if index == 0 else replace(item, separator=separator, break_suffix=suffix)
            for index, item in enumerate(items)
        ]

    def _paren_list(
        self,
        prefix: str,
        items: list[SubElement],
        mode: AlignmentMode,
        opening: WS,
        closing: WS,
        empty: WS,
        comma: WS,
    ) -> SubElement:
        """``prefix(item, item)`` with the whitespace of the given contexts."""
        if not items:
            between = " " if self.ws.space_after(empty) else ""
            return _text(prefix + self.ws.before(opening, "(") + between + ")")
        return _group(
            self._comma_list(items, comma),
            mode,
            opening=prefix + self.ws.around(opening, "("),
            closing=self.ws.before(closing, ")"),
        )

    def _keyword_header(
        self,
        keyword: str,
        opening: WS,
        closing: WS,
        *parts: SubElement | str,
    ) -> SubElement:
        return _join(keyword + self.ws.around(opening, "("), *parts, self.ws.before(closing, ")"))

    def _arguments(self, arguments: list[Expression]) -> list[SubElement]:
        items = []
        for argument in arguments:
            if isinstance(argument, ArrayLiteral):
                items.append(self._array(argument, in_arguments=True))
            else:
                items.append(self.visit(argument))
        return items

    def _invocation(
        self,
        callee: SubElement,
        arguments: list[Expression],
        comma: WS = WS.COMMA_IN_METHOD_INVOCATION_ARGUMENTS,
        mode_option: str = "alignment_for_arguments_in_method_invocation",
    ) -> SubElement:
        call = self._paren_list(
            callee.text if callee.nested is None else "",
            self._arguments(arguments),
            self.options.get(mode_option),
            WS.OPENING_PAREN_IN_METHOD_INVOCATION,
            WS.CLOSING_PAREN_IN_METHOD_INVOCATION,
            WS.EMPTY_PARENS_IN_METHOD_INVOCATION,
            comma,
        )
        if callee.nested is None:
            return call
        return _join(callee, call)

    # Expressions

    def visit_variable(self, node: Variable) -> SubElement:
        return _text(f"${node.name}")

    def visit_name(self, node: Name) -> SubElement:
        return _text(node.name)

    def visit_literal(self, node: Literal) -> SubElement:
        return _text(node.value)

    def visit_array_element(self, node: ArrayElement) -> SubElement:
        return self._array_element(node, 0)

    def _array_element(self, node: ArrayElement, key_width: int) -> SubElement:
        value = self.visit(node.value)
        if node.by_ref:
            value = _join("&", value)
        if node.key is None:
            return value
        key = self.visit(node.key)
        if key_width and key.nested is None:
            key = _text(key.text.ljust(key_width))
        return _join(key, self.ws.around(WS.DOUBLE_ARROW_OPERATOR, "=>"), value)

    def visit_array_literal(self, node: ArrayLiteral) -> SubElement:
        return self._array(node)

    def _array(self, node: ArrayLiteral, in_arguments: bool = False) -> SubElement:
        """Array initializer, honoring the array new-line and filler options."""
        options = self.options
        if node.short:
            opener = self.ws.after(WS.OPENING_BRACE_IN_ARRAY_INITIALIZER, "[")
            closer = "]"
        else:
            opener = "array" + self.ws.around(WS.OPENING_BRACE_IN_ARRAY_INITIALIZER, "(")
            closer = ")"
        closing = self.ws.before(WS.CLOSING_BRACE_IN_ARRAY_INITIALIZER, closer)

        newline_after = options.insert_new_line_after_opening_brace_in_array_initializer
        newline_before = options.insert_new_line_before_closing_brace_in_array_initializer
        if not node.elements:
            opening = opener[: -1 if opener.endswith(" ") else None]
            keep_on_one_line = options.keep_empty_array_initializer_on_one_line
            if (newline_after or newline_before) and not keep_on_one_line:
                fragment = Fragment(opening=opening, closing=closer, break_before_closing=True)
                return SubElement(nested=fragment, nested_mode=NO_ALIGNMENT)
            between = self.ws.space_after(WS.EMPTY_BRACES_IN_ARRAY_INITIALIZER)
            return _text(opening + (" " if between else "") + closer)

        mode = options.alignment_for_expressions_in_array_initializer
        only_when_split = False
        if in_arguments:
            if not options.wrap_array_in_arguments:
                mode = NO_ALIGNMENT
            newline_after = newline_before = (
                options.insert_new_line_after_opening_brace_in_array_initializer_in_arguments
            )
            only_when_split = True

        key_width = 0
        keyed = [element for element in node.elements if element.key is not None]
        if (
            keyed
            and options.insert_space_before_double_arrow_operator_with_filler
            and mode.strategy is SplitStrategy.ONE_PER_LINE_SPLIT
        ):
            key_width = max(len(self.visit(element.key).flat_text) for element in keyed)

        items = [self._array_element(element, key_width) for element in node.elements]
        return _group(
            self._comma_list(items, WS.COMMA_IN_ARRAY_INITIALIZER),
            mode,
            opening=opener,
            closing=closing,
            break_after_opening=newline_after,
            break_before_closing=newline_before,
            breaks_only_when_split=only_when_split,
            continuation_indentation=options.continuation_indentation_for_array_initializer,
        )

    def visit_array_access(self, node: ArrayAccess) -> SubElement:
        target = self.visit(node.target)
        if node.index is None:
            empty = WS.EMPTY_BRACKETS_IN_ARRAY_ALLOCATION_EXPRESSION
            opening = self.ws.before(WS.OPENING_BRACKET_IN_ARRAY_ALLOCATION_EXPRESSION, "[")
            between = " " if self.ws.space_after(empty) else ""
            return _join(target, opening + between + "]")
        return _join(
            target,
            self.ws.around(WS.OPENING_BRACKET_IN_ARRAY_REFERENCE, "["),
            self.visit(node.index),
            self.ws.before(WS.CLOSING_BRACKET_IN_ARRAY_REFERENCE, "]"),
        )

    def visit_function_call(self, node: FunctionCall) -> SubElement:
        return self._invocation(self.visit(node.function), node.arguments)

    def visit_method_call(self, node: MethodCall) -> SubElement:
        return self._selector_chain(node)

    def visit_property_fetch(self, node: PropertyFetch) -> SubElement:
        return self._selector_chain(node)

    def _selector_chain(self, node: MethodCall | PropertyFetch) -> SubElement:
        """``$a->b()->c()``: one fragment when the chain holds several calls."""
        segments: list[MethodCall | PropertyFetch] = []
        current: Expression = node
        while isinstance(current, MethodCall | PropertyFetch):
            segments.append(current)
            current = current.target
        segments.reverse()

        before = " " if self.ws.space_before(WS.OBJECT_OPERATOR) else ""
        arrow = self.ws.after(WS.OBJECT_OPERATOR, "->")
        pieces = [self.visit(current)]
        calls = sum(isinstance(segment, MethodCall) for segment in segments)
        for segment in segments:
            if isinstance(segment, PropertyFetch):
                pieces[-1] = _join(pieces[-1], before + arrow + segment.name)
                continue
            call = self._invocation(_text(arrow + segment.method), segment.arguments)
            if calls < 2:
                pieces[-1] = _join(pieces[-1], before, call)
            else:
                pieces.append(replace(call, separator=before))
        if len(pieces) == 1:
            return pieces[0]
        return _group(pieces, self.options.alignment_for_selector_in_method_invocation)

    def visit_static_call(self, node: StaticCall) -> SubElement:
        callee = _join(
            self.visit(node.class_name),
            self.ws.around(WS.DOUBLE_COLON_OPERATOR, "::") + node.method,
        )
        if node.is_constructor_call:
            return self._invocation(
                callee,
                node.arguments,
                WS.COMMA_IN_EXPLICIT_CONSTRUCTOR_CALL_ARGUMENTS,
                "alignment_for_arguments_in_explicit_constructor_call",
            )
        return self._invocation(callee, node.arguments)

    def visit_class_constant_fetch(self, node: ClassConstantFetch) -> SubElement:
        operator = self.ws.around(WS.DOUBLE_COLON_OPERATOR, "::")
        return _join(self.visit(node.class_name), operator + node.name)

    def visit_new_expression(self, node: NewExpression) -> SubElement:
        callee = _join("new ", self.visit(node.class_name))
        if node.arguments is None:
            return callee
        return self._invocation(
            callee,
            node.arguments,
            WS.COMMA_IN_ALLOCATION_EXPRESSION,
            "alignment_for_arguments_in_allocation_expression",
        )

    def visit_binary_expression(self, node: BinaryExpression) -> SubElement:
        operands: list[tuple[str, Expression]] = []
        current: Expression = node
        while isinstance(current, BinaryExpression) and current.operator == node.operator:
            operands.append((current.operator, current.right))
            current = current.left
        operands.reverse()

        if node.is_concat:
            context = WS.CONCAT_OPERATOR
            mode = self.options.alignment_for_concat_expression
            wrap_before = self.options.wrap_before_concat_operator
        else:
            context = WS.BINARY_OPERATOR
            mode = self.options.alignment_for_binary_expression
            wrap_before = self.options.wrap_before_binary_operator

        elements = [self.visit(current)]
        for operator, operand in operands:
            if operator in KEYWORD_OPERATORS:
                separator, leading, trailing = f" {operator} ", f"{operator} ", f" {operator}"
            else:
                separator = self.ws.around(context, operator)
                leading = self.ws.after(context, operator)
                trailing = self.ws.before(context, operator)
            element = replace(self.visit(operand), separator=separator)
            if wrap_before:
                element = replace(element, break_prefix=leading)
            else:
                element = replace(element, break_suffix=trailing)
            elements.append(element)
        return _group(elements, mode)

    def visit_unary_expression(self, node: UnaryExpression) -> SubElement:
        return _join(self.ws.around(WS.UNARY_OPERATOR, node.operator), self.visit(node.operand))

    def visit_prefix_expression(self, node: PrefixExpression) -> SubElement:
        return _join(self.ws.around(WS.PREFIX_OPERATOR, node.operator), self.visit(node.operand))

    def visit_postfix_expression(self, node: PostfixExpression) -> SubElement:
        return _join(self.visit(node.operand), self.ws.around(WS.POSTFIX_OPERATOR, node.operator))

    def visit_cast_expression(self, node: CastExpression) -> SubElement:
        cast = (
            self.ws.after(WS.OPENING_PAREN_IN_CAST, "(")
            + node.type_name
            + self.ws.around(WS.CLOSING_PAREN_IN_CAST, ")")
        )
        return _join(cast, self.visit(node.operand))

    def visit_assignment(self, node: Assignment) -> SubElement:
        target = self.visit(node.target)
        operator = self.ws.around(WS.ASSIGNMENT_OPERATOR, node.operator)
        value = self.visit(node.value)
        mode = self.options.alignment_for_assignment
        if mode.strategy is SplitStrategy.NO_ALIGNMENT or target.nested is not None:
            return _join(target, operator, value)
        return _group([value], mode, opening=target.text + operator)

    def visit_conditional_expression(self, node: ConditionalExpression) -> SubElement:
        question = WS.QUESTION_IN_CONDITIONAL
        colon = WS.COLON_IN_CONDITIONAL
        elements = [self.visit(node.condition)]
        if node.if_true is None:
            separator = self._glue(question) + "?:" + (" " if self.ws.space_after(colon) else "")
            elvis = replace(
                self.visit(node.if_false),
                separator=separator,
                break_prefix=separator.lstrip(),
            )
            elements.append(elvis)
        else:
            elements.append(
                replace(
                    self.visit(node.if_true),
                    separator=self.ws.around(question, "?"),
                    break_prefix=self.ws.after(question, "?"),
                ),
            )
            elements.append(
                replace(
                    self.visit(node.if_false),
                    separator=self.ws.around(colon, ":"),
                    break_prefix=self.ws.after(colon, ":"),
                ),
            )
        return _group(elements, self.options.alignment_for_conditional_expression)

    def visit_parenthesized_expression(self, node: ParenthesizedExpression) -> SubElement:
        return _join(
            self.ws.after(WS.OPENING_PAREN_IN_PARENTHESIZED_EXPRESSION, "("),
            self.visit(node.expression),
            self.ws.before(WS.CLOSING_PAREN_IN_PARENTHESIZED_EXPRESSION, ")"),
        )

    # Files and declarations

    def visit_php_file(self, node: PhpFile) -> None:
        self._lines.append(node.open_tag)
        self._write_top_level(node.statements)

    def _write_top_level(self, statements: list[ASTNode], previous: ASTNode | None = None) -> None:
        for statement in statements:
            self._request_blank_lines(self._blank_lines_between(previous, statement))
            self.visit(statement)
            previous = statement
        self._flush_carry()

    def _blank_lines_between(self, previous: ASTNode | None, current: ASTNode) -> int:
        options = self.options
        counts = [0]
        if isinstance(current, NamespaceDeclaration):
            counts.append(options.blank_lines_before_package)
        if isinstance(previous, NamespaceDeclaration) and not previous.bracketed:
            counts.append(options.blank_lines_after_package)
        if isinstance(current, UseStatement):
            if isinstance(previous, UseStatement):
                if previous.kind != current.kind:
                    counts.append(options.blank_lines_between_import_groups)
            else:
                counts.append(options.blank_lines_before_imports)
        elif isinstance(previous, UseStatement):
            counts.append(options.blank_lines_after_imports)
        if isinstance(current, ClassDeclaration) and isinstance(previous, ClassDeclaration):
            counts.append(options.blank_lines_between_type_declarations)
        if isinstance(current, MethodDeclaration) and previous is not None:
            counts.append(options.blank_lines_before_method)
        if previous is None and not isinstance(current, NamespaceDeclaration | UseStatement):
            return 0
        return max(counts)

    def visit_namespace_declaration(self, node: NamespaceDeclaration) -> None:
        header = "namespace" + (f" {node.name}" if node.name else "")
        if not node.bracketed:
            self._writeline(header + self._semicolon())
            if node.statements:
                self._write_top_level(node.statements, previous=node)
            return
        self._write_braced(
            ConstructKind.NAMESPACE_DECLARATION,
            _text(header),
            self._glue(WS.OPENING_BRACE_IN_NAMESPACE_DECLARATION),
            (lambda: self._write_top_level(node.statements)) if node.statements else None,
            self.options.insert_new_line_after_namespace_declaration,
        )

    def visit_use_statement(self, node: UseStatement) -> None:
        kind = f"{node.kind} " if node.kind else ""
        self._writeline(f"use {kind}" + ", ".join(node.names) + self._semicolon())

    def visit_trait_use(self, node: TraitUse) -> None:
        self._writeline("use " + ", ".join(node.traits) + self._semicolon())

    def visit_class_declaration(self, node: ClassDeclaration) -> None:
        head = " ".join([*node.modifiers, node.kind, node.name])
        elements = [_text(head)]
        if node.superclass:
            elements.append(SubElement(text=f"extends {node.superclass}", separator=" "))
        if node.interfaces:
            keyword = "extends" if node.kind == "interface" else "implements"
            interfaces = self._comma_list(
                [_text(name) for name in node.interfaces],
                WS.COMMA_IN_SUPERINTERFACES,
            )
            implements = _group(
                interfaces,
                self.options.alignment_for_superinterfaces_in_type_declaration,
                opening=f"{keyword} ",
            )
            elements.append(replace(implements, separator=" "))
        header = _group(elements, self.options.alignment_for_superclass_in_type_declaration)
        self._write_braced(
            ConstructKind.TYPE_DECLARATION,
            header,
            self._glue(WS.OPENING_BRACE_IN_TYPE_DECLARATION),
            (lambda: self._write_members(node.members)) if node.members else None,
            self.options.insert_new_line_in_empty_type_declaration,
        )

    def _write_members(self, members: list[ASTNode]) -> None:
        previous_kind: str | None = None
        previous: ASTNode | None = None
        options = self.options
        for index, member in enumerate(members):
            kind = self._member_kind(members, index)
            if index == 0:
                self._request_blank_lines(options.blank_lines_before_first_class_body_declaration)
            elif not isinstance(previous, Comment):
                if kind == "method":
                    count = options.blank_lines_before_method
                else:
                    count = options.blank_lines_before_field
                if kind != previous_kind:
                    count = max(count, options.blank_lines_before_new_chunk)
                self._request_blank_lines(count)
            self.visit(member)
            previous, previous_kind = member, kind

    @staticmethod
    def _member_kind(members: list[ASTNode], index: int) -> str:
        """Member kind, with comments taking the kind of the member they precede."""
        for member in members[index:]:
            if isinstance(member, MethodDeclaration):
                return "method"
            if not isinstance(member, Comment):
                return "field"
        return "field"

    def visit_parameter(self, node: Parameter) -> SubElement:
        text = ""
        if node.type_hint:
            spaced = not node.variadic or self.ws.space_before(WS.ELLIPSIS)
            text = node.type_hint + (" " if spaced else "")
        if node.by_ref:
            text += "&"
        if node.variadic:
            text += self.ws.after(WS.ELLIPSIS, "...")
        text += f"${node.name}"
        if node.default is None:
            return _text(text)
        return _join(text, self.ws.around(WS.ASSIGNMENT_OPERATOR, "="), self.visit(node.default))

    def visit_method_declaration(self, node: MethodDeclaration) -> None:
        if node.is_constructor:
            kind = ConstructKind.CONSTRUCTOR_DECLARATION
            contexts = (
                WS.OPENING_PAREN_IN_CONSTRUCTOR_DECLARATION,
                WS.CLOSING_PAREN_IN_CONSTRUCTOR_DECLARATION,
                WS.EMPTY_PARENS_IN_CONSTRUCTOR_DECLARATION,
                WS.COMMA_IN_CONSTRUCTOR_DECLARATION_PARAMETERS,
            )
            mode = self.options.alignment_for_parameters_in_constructor_declaration
            brace = WS.OPENING_BRACE_IN_CONSTRUCTOR_DECLARATION
        else:
            kind = ConstructKind.METHOD_DECLARATION
            contexts = (
                WS.OPENING_PAREN_IN_METHOD_DECLARATION,
                WS.CLOSING_PAREN_IN_METHOD_DECLARATION,
                WS.EMPTY_PARENS_IN_METHOD_DECLARATION,
                WS.COMMA_IN_METHOD_DECLARATION_PARAMETERS,
            )
            mode = self.options.alignment_for_parameters_in_method_declaration
            brace = WS.OPENING_BRACE_IN_METHOD_DECLARATION

        reference = "&" if node.by_ref else ""
        prefix = " ".join([*node.modifiers, "function"]) + f" {reference}{node.name}"
        parameters = [self.visit(parameter) for parameter in node.parameters]
        header = self._paren_list(prefix, parameters, mode, *contexts)
        if node.return_type:
            header = _join(header, f": {node.return_type}")

        if node.body is None:
            self._write_element(header, self._semicolon())
            return
        statements = node.body.statements

        def write_body() -> None:
            self._request_blank_lines(self.options.blank_lines_at_beginning_of_method_body)
            self._write_statements(statements)

        self._write_braced(
            kind,
            header,
            self._glue(brace),
            write_body if statements else None,
            self.options.insert_new_line_in_empty_method_body,
        )

    def _declarators(
        self,
        node: FieldDeclaration | ConstantDeclaration | StaticStatement,
        comma: WS,
    ) -> list[SubElement]:
        return self._comma_list([self.visit(d) for d in node.declarators], comma)

    def visit_variable_declarator(self, node: VariableDeclarator) -> SubElement:
        target = self.visit(node.target)
        if node.initializer is None:
            return target
        operator = self.ws.around(WS.ASSIGNMENT_OPERATOR, "=")
        return _join(target, operator, self.visit(node.initializer))

    def visit_field_declaration(self, node: FieldDeclaration) -> None:
        modifiers = " ".join(node.modifiers) if node.modifiers else "var"
        declaration = _group(
            self._declarators(node, WS.COMMA_IN_MULTIPLE_FIELD_DECLARATIONS),
            self.options.alignment_for_multiple_fields,
            opening=f"{modifiers} ",
        )
        self._write_element(declaration, self._semicolon())

    def visit_constant_declaration(self, node: ConstantDeclaration) -> None:
        opening = " ".join([*node.modifiers, "const"]) + " "
        declaration = _group(
            self._declarators(node, WS.COMMA_IN_MULTIPLE_FIELD_DECLARATIONS),
            self.options.alignment_for_multiple_fields,
            opening=opening,
        )
        self._write_element(declaration, self._semicolon())

    def visit_comment(self, node: Comment) -> None:
        lines = node.text.split("\n")
        if node.is_multiline:
            keep_column = self.options.never_indent_block_comments_on_first_column
        else:
            keep_column = self.options.never_indent_line_comments_on_first_column
        if node.first_column and keep_column and not self._carry:
            self._flush_blank_lines()
            self._lines.extend(lines)
            return
        self._writeline(lines[0])
        for line in lines[1:]:
            stripped = line.strip()
            self._writeline((" " + stripped) if stripped.startswith("*") else stripped)

    # Statements

    def _write_statements(self, statements: list[ASTNode]) -> None:
        for statement in statements:
            self.visit(statement)
        self._flush_carry()

    def _write_braced(
        self,
        kind: ConstructKind,
        header: SubElement,
        glue: str,
        write_body: Callable[[], None] | None,
        empty_newline: bool,
    ) -> None:
        """Write ``header {``, the body and the closing brace."""
        text, wrapped = self._render(header)
        newline, shift = self.braces.opening_brace(kind, wrapped)
        inner = self.braces.body_levels(kind, wrapped) - shift
        if not text and not self._carry:
            newline, shift = False, 0
            glue = ""
        if newline:
            self._writeline(text)
            self.level += shift
            self._writeline("{")
        else:
            self._writeline(text + glue + "{")

        if write_body is None:
            if empty_newline:
                self._writeline("}")
            else:
                self._append("}")
        else:
            self.level += inner
            self._discard_blank_lines()
            write_body()
            self._flush_carry()
            self._discard_blank_lines()
            self.level -= inner
            self._writeline("}")
        self.level -= shift

    def _body_writer(self, statements: list[ASTNode]) -> Callable[[], None] | None:
        if not statements:
            return None
        return lambda: self._write_statements(statements)

    def _write_controlled(
        self,
        header: SubElement,
        body: Statement | None,
        keep_on_same_line: bool = False,
    ) -> None:
        """Write a control statement header followed by its body."""
        if isinstance(body, Block):
            self._write_braced(
                ConstructKind.BLOCK,
                header,
                self._glue(WS.OPENING_BRACE_IN_BLOCK),
                self._body_writer(body.statements),
                self.options.insert_new_line_in_empty_block,
            )
            return
        if body is None or isinstance(body, EmptyStatement):
            if body is not None and self.options.put_empty_statement_on_new_line:
                self._write_element(header)
                self.level += 1
                self._writeline(";")
                self.level -= 1
            else:
                self._write_element(header, self._semicolon())
            return
        if keep_on_same_line:
            text, _ = self._render(header)
            self._carry += text + " "
            self.visit(body)
            return
        self._write_element(header)
        self.level += 1
        self.visit(body)
        self._flush_carry()
        self.level -= 1

    def _follows_closing_brace(self, body: Statement | None, newline_option: bool) -> None:
        """Continue after ``}`` on the same line unless a new line is requested."""
        if isinstance(body, Block) and not newline_option:
            self._resume_last_line(" " if self.ws.space_after(WS.CLOSING_BRACE_IN_BLOCK) else "")

    def _simple_statement(self, node: ASTNode) -> SubElement | None:
        """Single-line form of simple statements, used by the keep-on-one-line options."""
        semicolon = self._semicolon()
        if isinstance(node, ExpressionStatement):
            return _join(self.visit(node.expression), semicolon)
        if isinstance(node, ReturnStatement):
            context = WS.PARENTHESIZED_EXPRESSION_IN_RETURN
            return _join(self._keyword_expression("return", node.expression, context), semicolon)
        if isinstance(node, ThrowStatement):
            context = WS.PARENTHESIZED_EXPRESSION_IN_THROW
            return _join(self._keyword_expression("throw", node.expression, context), semicolon)
        if isinstance(node, BreakStatement | ContinueStatement):
            keyword = "break" if isinstance(node, BreakStatement) else "continue"
            if node.levels is None:
                return _text(keyword + semicolon)
            return _join(keyword + " ", self.visit(node.levels), semicolon)
        if isinstance(node, EchoStatement):
            return _join(self._echo(node), semicolon)
        if isinstance(node, GotoStatement):
            return _text(f"goto {node.label}{semicolon}")
        return None

    def _keyword_expression(
        self,
        keyword: str,
        expression: Expression | None,
        context: WS,
    ) -> SubElement:
        if expression is None:
            return _text(keyword)
        if isinstance(expression, ParenthesizedExpression):
            return _join(keyword + self._glue(context), self.visit(expression))
        return _join(keyword + " ", self.visit(expression))

    def _echo(self, node: EchoStatement) -> SubElement:
        if len(node.expressions) == 1:
            context = WS.PARENTHESIZED_EXPRESSION_IN_ECHO
            return self._keyword_expression("echo", node.expressions[0], context)
        items = [self.visit(expression) for expression in node.expressions]
        items[1:] = [replace(item, separator=", ", break_suffix=",") for item in items[1:]]
        return _group(items, NO_ALIGNMENT, opening="echo ")

    def visit_block(self, node: Block) -> None:
        self._write_braced(
            ConstructKind.BLOCK,
            _text(""),
            "",
            self._body_writer(node.statements),
            self.options.insert_new_line_in_empty_block,
        )

    def visit_expression_statement(self, node: ExpressionStatement) -> None:
        self._write_element(self._simple_statement(node))

    def visit_empty_statement(self, node: EmptyStatement) -> None:
        self._writeline(";")

    def visit_echo_statement(self, node: EchoStatement) -> None:
        self._write_element(self._simple_statement(node))

    def visit_return_statement(self, node: ReturnStatement) -> None:
        self._write_element(self._simple_statement(node))

    def visit_throw_statement(self, node: ThrowStatement) -> None:
        self._write_element(self._simple_statement(node))

    def visit_break_statement(self, node: BreakStatement) -> None:
        self._write_element(self._simple_statement(node))

    def visit_continue_statement(self, node: ContinueStatement) -> None:
        self._write_element(self._simple_statement(node))

    def visit_goto_statement(self, node: GotoStatement) -> None:
        self._write_element(self._simple_statement(node))

    def visit_label_statement(self, node: LabelStatement) -> None:
        colon = WS.COLON_IN_LABELED_STATEMENT
        label = node.name + self.ws.before(colon, ":")
        if self.options.insert_new_line_after_label:
            self._writeline(label)
        else:
            self._carry += label + (" " if self.ws.space_after(colon) else "")

    def visit_global_statement(self, node: GlobalStatement) -> None:
        variables = [self.visit(variable) for variable in node.variables]
        items = self._comma_list(variables, WS.COMMA_IN_MULTIPLE_LOCAL_DECLARATIONS)
        self._write_element(_group(items, NO_ALIGNMENT, opening="global "), self._semicolon())

    def visit_static_statement(self, node: StaticStatement) -> None:
        items = self._declarators(node, WS.COMMA_IN_MULTIPLE_LOCAL_DECLARATIONS)
        self._write_element(_group(items, NO_ALIGNMENT, opening="static "), self._semicolon())

    def visit_if_statement(self, node: IfStatement) -> None:
        options = self.options
        header = self._keyword_header(
            "if",
            WS.OPENING_PAREN_IN_IF,
            WS.CLOSING_PAREN_IN_IF,
            self.visit(node.condition),
        )
        then = node.then_statement

        if node.else_statement is None:
            compact = self._compact_if(header, then)
            if compact is not None:
                self._write_element(compact)
                return

        self._write_controlled(header, then, options.keep_then_statement_on_same_line)
        otherwise = node.else_statement
        if otherwise is None:
            return
        self._follows_closing_brace(then, options.insert_new_line_before_else_in_if_statement)
        if isinstance(otherwise, IfStatement) and options.compact_else_if:
            self._carry += "else "
            self.visit_if_statement(otherwise)
            return
        self._write_controlled(_text("else"), otherwise, options.keep_else_statement_on_same_line)

    def _compact_if(self, header: SubElement, then: Statement) -> SubElement | None:
        """One-line form of an ``if`` without ``else``, if an option asks for it."""
        options = self.options
        if options.keep_simple_if_on_one_line and not isinstance(then, Block):
            statement = self._simple_statement(then)
            if statement is not None:
                elements = [header, replace(statement, separator=" ")]
                return _group(elements, options.alignment_for_compact_if)
        if (
            options.keep_guardian_clause_on_one_line
            and isinstance(then, Block)
            and len(then.statements) == 1
            and isinstance(then.statements[0], ReturnStatement | ThrowStatement)
        ):
            statement = self._simple_statement(then.statements[0])
            return _join(header, self._glue(WS.OPENING_BRACE_IN_BLOCK) + "{ ", statement, " }")
        return None

    def visit_while_statement(self, node: WhileStatement) -> None:
        header = self._keyword_header(
            "while",
            WS.OPENING_PAREN_IN_WHILE,
            WS.CLOSING_PAREN_IN_WHILE,
            self.visit(node.condition),
        )
        self._write_controlled(header, node.body)

    def visit_do_statement(self, node: DoStatement) -> None:
        self._write_controlled(_text("do"), node.body)
        newline = self.options.insert_new_line_before_while_in_do_statement
        self._follows_closing_brace(node.body, newline)
        footer = self._keyword_header(
            "while",
            WS.OPENING_PAREN_IN_WHILE,
            WS.CLOSING_PAREN_IN_WHILE,
            self.visit(node.condition),
        )
        self._write_element(footer, self._semicolon())

    def _expression_list(self, expressions: list[Expression], comma: WS) -> SubElement | None:
        if not expressions:
            return None
        items = self._comma_list([self.visit(e) for e in expressions], comma)
        if len(items) == 1:
            return items[0]
        return _group(items, NO_ALIGNMENT)

    def visit_for_statement(self, node: ForStatement) -> None:
        # no option covers condition commas; they share the initialization ones
        sections = [
            self._expression_list(node.initializers, WS.COMMA_IN_FOR_INITS),
            self._expression_list(node.conditions, WS.COMMA_IN_FOR_INITS),
            self._expression_list(node.updaters, WS.COMMA_IN_FOR_INCREMENTS),
        ]
        space_before = self.ws.space_before(WS.SEMICOLON_IN_FOR)
        space_after = self.ws.space_after(WS.SEMICOLON_IN_FOR)
        parts: list[SubElement | str] = []
        for index, section in enumerate(sections):
            if index:
                before = " " if space_before and sections[index - 1] is not None else ""
                after = " " if space_after and section is not None else ""
                parts.append(before + ";" + after)
            if section is not None:
                parts.append(section)
        header = self._keyword_header(
            "for",
            WS.OPENING_PAREN_IN_FOR,
            WS.CLOSING_PAREN_IN_FOR,
            *parts,
        )
        self._write_controlled(header, node.body)

    def visit_foreach_statement(self, node: ForeachStatement) -> None:
        parts: list[SubElement | str] = [self.visit(node.expression), " as "]
        if node.key is not None:
            parts.extend([self.visit(node.key), self.ws.around(WS.DOUBLE_ARROW_OPERATOR, "=>")])
        if node.by_ref:
            parts.append("&")
        parts.append(self.visit(node.value))
        header = self._keyword_header(
            "foreach",
            WS.OPENING_PAREN_IN_FOR,
            WS.CLOSING_PAREN_IN_FOR,
            *parts,
        )
        self._write_controlled(header, node.body)

    def visit_switch_statement(self, node: SwitchStatement) -> None:
        header = self._keyword_header(
            "switch",
            WS.OPENING_PAREN_IN_SWITCH,
            WS.CLOSING_PAREN_IN_SWITCH,
            self.visit(node.expression),
        )

        def write_cases() -> None:
            for case in node.cases:
                self.visit(case)

        self._write_braced(
            ConstructKind.SWITCH,
            header,
            self._glue(WS.OPENING_BRACE_IN_SWITCH),
            write_cases if node.cases else None,
            self.options.insert_new_line_in_empty_block,
        )

    def visit_switch_case(self, node: SwitchCase) -> None:
        if node.is_default:
            label = _text("default" + self.ws.before(WS.COLON_IN_DEFAULT, ":"))
            glue = self._glue(WS.OPENING_BRACE_IN_BLOCK)
        else:
            label = _join("case ", self.visit(node.value), self.ws.before(WS.COLON_IN_CASE, ":"))
            glue = " " if self.ws.space_after(WS.COLON_IN_CASE) else ""

        statements = node.statements
        if len(statements) == 1 and isinstance(statements[0], Block):
            self._write_braced(
                ConstructKind.BLOCK_IN_CASE,
                label,
                glue,
                self._body_writer(statements[0].statements),
                self.options.insert_new_line_in_empty_block,
            )
            return

        self._write_element(label)
        for statement in statements:
            if isinstance(statement, BreakStatement):
                levels = self.braces.break_levels()
            else:
                levels = self.braces.case_body_levels()
            self.level += levels
            self.visit(statement)
            self._flush_carry()
            self.level -= levels

    def visit_try_statement(self, node: TryStatement) -> None:
        glue = self._glue(WS.OPENING_BRACE_IN_BLOCK)
        self._write_braced(
            ConstructKind.BLOCK,
            _text("try"),
            glue,
            self._body_writer(node.body.statements),
            self.options.insert_new_line_in_empty_block,
        )
        for catch in node.catches:
            self.visit(catch)
        if node.finally_block is not None:
            newline = self.options.insert_new_line_before_finally_in_try_statement
            self._follows_closing_brace(Block(), newline)
            self._write_braced(
                ConstructKind.BLOCK,
                _text("finally"),
                glue,
                self._body_writer(node.finally_block.statements),
                self.options.insert_new_line_in_empty_block,
            )

    def visit_catch_clause(self, node: CatchClause) -> None:
        newline = self.options.insert_new_line_before_catch_in_try_statement
        self._follows_closing_brace(Block(), newline)
        types = " | ".join(name.name for name in node.types)
        parts: list[SubElement | str] = [types]
        if node.variable is not None:
            parts.extend([" ", self.visit(node.variable)])
        header = self._keyword_header(
            "catch",
            WS.OPENING_PAREN_IN_CATCH,
            WS.CLOSING_PAREN_IN_CATCH,
            *parts,
        )
        self._write_braced(
            ConstructKind.BLOCK,
            header,
            self._glue(WS.OPENING_BRACE_IN_BLOCK),
            self._body_writer(node.body.statements),
            self.options.insert_new_line_in_empty_block,
        )


def format_tree(tree: ASTNode, options: OptionSet | None = None) -> str:
    """Format ``tree`` with ``options`` (defaults when omitted)."""
    return CodeFormatter(options).format(tree)
