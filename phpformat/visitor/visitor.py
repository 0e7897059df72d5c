"""Visitor pattern implementation for AST traversal."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

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


T = TypeVar("T")


class ASTVisitor(ABC, Generic[T]):
    """Base visitor class for traversing AST nodes.

    Nodes that only inherit ``accept`` from the ``Expression`` or
    ``Statement`` base land in :meth:`generic_visit`, as does anything that
    is not an AST node at all.
    """

    def visit(self, node: ASTNode) -> T:
        """Visit a node by calling its accept method."""
        if not isinstance(node, ASTNode):
            return self.generic_visit(node)
        return node.accept(self)

    def generic_visit(self, node: Any) -> T:
        """Handle a node no specific visit method exists for."""
        msg = f"No visit method for {type(node).__name__}"
        raise NotImplementedError(msg)

    def visit_expression(self, node: Expression) -> T:
        return self.generic_visit(node)

    def visit_statement(self, node: Statement) -> T:
        return self.generic_visit(node)

    @abstractmethod
    def visit_php_file(self, node: PhpFile) -> T:
        """Visit PhpFile node."""

    @abstractmethod
    def visit_comment(self, node: Comment) -> T:
        """Visit Comment node."""

    @abstractmethod
    def visit_variable(self, node: Variable) -> T:
        """Visit Variable node."""

    @abstractmethod
    def visit_name(self, node: Name) -> T:
        """Visit Name node."""

    @abstractmethod
    def visit_literal(self, node: Literal) -> T:
        """Visit Literal node."""

    @abstractmethod
    def visit_array_element(self, node: ArrayElement) -> T:
        """Visit ArrayElement node."""

    @abstractmethod
    def visit_array_literal(self, node: ArrayLiteral) -> T:
        """Visit ArrayLiteral node."""

    @abstractmethod
    def visit_array_access(self, node: ArrayAccess) -> T:
        """Visit ArrayAccess node."""

    @abstractmethod
    def visit_function_call(self, node: FunctionCall) -> T:
        """Visit FunctionCall node."""

    @abstractmethod
    def visit_method_call(self, node: MethodCall) -> T:
        """Visit MethodCall node."""

    @abstractmethod
    def visit_property_fetch(self, node: PropertyFetch) -> T:
        """Visit PropertyFetch node."""

    @abstractmethod
    def visit_static_call(self, node: StaticCall) -> T:
        """Visit StaticCall node."""

    @abstractmethod
    def visit_class_constant_fetch(self, node: ClassConstantFetch) -> T:
        """Visit ClassConstantFetch node."""

    @abstractmethod
    def visit_new_expression(self, node: NewExpression) -> T:
        """Visit NewExpression node."""

    @abstractmethod
    def visit_binary_expression(self, node: BinaryExpression) -> T:
        """Visit BinaryExpression node."""

    @abstractmethod
    def visit_unary_expression(self, node: UnaryExpression) -> T:
        """Visit UnaryExpression node."""

    @abstractmethod
    def visit_prefix_expression(self, node: PrefixExpression) -> T:
        """Visit PrefixExpression node."""

    @abstractmethod
    def visit_postfix_expression(self, node: PostfixExpression) -> T:
        """Visit PostfixExpression node."""

    @abstractmethod
    def visit_cast_expression(self, node: CastExpression) -> T:
        """Visit CastExpression node."""

    @abstractmethod
    def visit_assignment(self, node: Assignment) -> T:
        """Visit Assignment node."""

    @abstractmethod
    def visit_conditional_expression(self, node: ConditionalExpression) -> T:
        """Visit ConditionalExpression node."""

    @abstractmethod
    def visit_parenthesized_expression(self, node: ParenthesizedExpression) -> T:
        """Visit ParenthesizedExpression node."""

    @abstractmethod
    def visit_block(self, node: Block) -> T:
        """Visit Block node."""

    @abstractmethod
    def visit_expression_statement(self, node: ExpressionStatement) -> T:
        """Visit ExpressionStatement node."""

    @abstractmethod
    def visit_empty_statement(self, node: EmptyStatement) -> T:
        """Visit EmptyStatement node."""

    @abstractmethod
    def visit_echo_statement(self, node: EchoStatement) -> T:
        """Visit EchoStatement node."""

    @abstractmethod
    def visit_return_statement(self, node: ReturnStatement) -> T:
        """Visit ReturnStatement node."""

    @abstractmethod
    def visit_throw_statement(self, node: ThrowStatement) -> T:
        """Visit ThrowStatement node."""

    @abstractmethod
    def visit_if_statement(self, node: IfStatement) -> T:
        """Visit IfStatement node."""

    @abstractmethod
    def visit_while_statement(self, node: WhileStatement) -> T:
        """Visit WhileStatement node."""

    @abstractmethod
    def visit_do_statement(self, node: DoStatement) -> T:
        """Visit DoStatement node."""

    @abstractmethod
    def visit_for_statement(self, node: ForStatement) -> T:
        """Visit ForStatement node."""

    @abstractmethod
    def visit_foreach_statement(self, node: ForeachStatement) -> T:
        """Visit ForeachStatement node."""

    @abstractmethod
    def visit_switch_case(self, node: SwitchCase) -> T:
        """Visit SwitchCase node."""

    @abstractmethod
    def visit_switch_statement(self, node: SwitchStatement) -> T:
        """Visit SwitchStatement node."""

    @abstractmethod
    def visit_break_statement(self, node: BreakStatement) -> T:
        """Visit BreakStatement node."""

    @abstractmethod
    def visit_continue_statement(self, node: ContinueStatement) -> T:
        """Visit ContinueStatement node."""

    @abstractmethod
    def visit_catch_clause(self, node: CatchClause) -> T:
        """Visit CatchClause node."""

    @abstractmethod
    def visit_try_statement(self, node: TryStatement) -> T:
        """Visit TryStatement node."""

    @abstractmethod
    def visit_variable_declarator(self, node: VariableDeclarator) -> T:
        """Visit VariableDeclarator node."""

    @abstractmethod
    def visit_global_statement(self, node: GlobalStatement) -> T:
        """Visit GlobalStatement node."""

    @abstractmethod
    def visit_static_statement(self, node: StaticStatement) -> T:
        """Visit StaticStatement node."""

    @abstractmethod
    def visit_label_statement(self, node: LabelStatement) -> T:
        """Visit LabelStatement node."""

    @abstractmethod
    def visit_goto_statement(self, node: GotoStatement) -> T:
        """Visit GotoStatement node."""

    @abstractmethod
    def visit_namespace_declaration(self, node: NamespaceDeclaration) -> T:
        """Visit NamespaceDeclaration node."""

    @abstractmethod
    def visit_use_statement(self, node: UseStatement) -> T:
        """Visit UseStatement node."""

    @abstractmethod
    def visit_parameter(self, node: Parameter) -> T:
        """Visit Parameter node."""

    @abstractmethod
    def visit_method_declaration(self, node: MethodDeclaration) -> T:
        """Visit MethodDeclaration node."""

    @abstractmethod
    def visit_field_declaration(self, node: FieldDeclaration) -> T:
        """Visit FieldDeclaration node."""

    @abstractmethod
    def visit_constant_declaration(self, node: ConstantDeclaration) -> T:
        """Visit ConstantDeclaration node."""

    @abstractmethod
    def visit_trait_use(self, node: TraitUse) -> T:
        """Visit TraitUse node."""

    @abstractmethod
    def visit_class_declaration(self, node: ClassDeclaration) -> T:
        """Visit ClassDeclaration node."""
