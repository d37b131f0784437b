"""AST node definitions for the varscript language.

This module defines the AST node dataclasses built by the parser. Each node
is a frozen dataclass carrying only the information the grammar produces
(names, raw literal text and child nodes). The `NodeType` enum identifies node
kinds and is used by the JSON serializer, the pretty-printer and the
visualizer.

Conventions:
- All AST node dataclasses inherit from `ASTNode` whose `type` field is the
    variant tag; it is fixed per class and not passed to the constructor.
- Nodes are immutable and child sequences are tuples, so a tree handed out by
    the parser cannot be changed afterwards. Nodes are never shared between
    parents.
- `Statement` and `Expression` name the closed sets of variants that may
    appear in those positions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple, Union


class NodeType(Enum):
    PROGRAM = auto()
    VAR_DECL = auto()
    EXPR_STMT = auto()
    CALL_EXPR = auto()
    IDENTIFIER = auto()
    NUMERIC_LITERAL = auto()
    STRING_LITERAL = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType = field(init=False)


# Expression Nodes
@dataclass(frozen=True)
class IdentifierNode(ASTNode):
    type: NodeType = field(default=NodeType.IDENTIFIER, init=False)
    name: str


@dataclass(frozen=True)
class NumericLiteralNode(ASTNode):
    type: NodeType = field(default=NodeType.NUMERIC_LITERAL, init=False)
    # Digits as written in the source; never converted to int.
    value: str


@dataclass(frozen=True)
class StringLiteralNode(ASTNode):
    type: NodeType = field(default=NodeType.STRING_LITERAL, init=False)
    value: str


@dataclass(frozen=True)
class CallExpressionNode(ASTNode):
    type: NodeType = field(default=NodeType.CALL_EXPR, init=False)
    callee: str
    arguments: Tuple[Expression, ...] = ()


Expression = Union[
    IdentifierNode, NumericLiteralNode, StringLiteralNode, CallExpressionNode
]


# Statement Nodes
@dataclass(frozen=True)
class VariableDeclarationNode(ASTNode):
    type: NodeType = field(default=NodeType.VAR_DECL, init=False)
    id: str
    init: Expression


@dataclass(frozen=True)
class ExpressionStatementNode(ASTNode):
    type: NodeType = field(default=NodeType.EXPR_STMT, init=False)
    expression: Expression


Statement = Union[VariableDeclarationNode, ExpressionStatementNode]


# Program Node
@dataclass(frozen=True)
class ProgramNode(ASTNode):
    type: NodeType = field(default=NodeType.PROGRAM, init=False)
    body: Tuple[Statement, ...] = ()
