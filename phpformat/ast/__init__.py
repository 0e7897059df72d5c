"""AST node classes for PHP files."""

from phpformat.ast.base import ASTNode, Comment, Location, PhpFile
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

__all__ = [
    "ASTNode",
    "ArrayAccess",
    "ArrayElement",
    "ArrayLiteral",
    "Assignment",
    "BinaryExpression",
    "Block",
    "BreakStatement",
    "CastExpression",
    "CatchClause",
    "ClassConstantFetch",
    "ClassDeclaration",
    "Comment",
    "ConditionalExpression",
    "ConstantDeclaration",
    "ContinueStatement",
    "DoStatement",
    "EchoStatement",
    "EmptyStatement",
    "Expression",
    "ExpressionStatement",
    "FieldDeclaration",
    "ForStatement",
    "ForeachStatement",
    "FunctionCall",
    "GlobalStatement",
    "GotoStatement",
    "IfStatement",
    "LabelStatement",
    "Literal",
    "Location",
    "MethodCall",
    "MethodDeclaration",
    "Name",
    "NamespaceDeclaration",
    "NewExpression",
    "Parameter",
    "ParenthesizedExpression",
    "PhpFile",
    "PostfixExpression",
    "PrefixExpression",
    "PropertyFetch",
    "ReturnStatement",
    "Statement",
    "StaticCall",
    "StaticStatement",
    "SwitchCase",
    "SwitchStatement",
    "ThrowStatement",
    "TraitUse",
    "TryStatement",
    "UnaryExpression",
    "UseStatement",
    "Variable",
    "VariableDeclarator",
    "WhileStatement",
]
