"""Graphviz visualization helpers for ASTs.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Layout: every AST node becomes a graph node labelled with its kind and, for
leaves, its name or literal text. Edges go from parent to child and carry the
field name (`init`, `expression`, `arg[0]`, `stmt[1]`, ...). The tree is drawn
top-down.
"""

from typing import Iterator, Tuple
from ast_nodes import *
from graphviz import Digraph
from pretty_printer import PrettyPrinter


NODE_LABELS = {
    NodeType.PROGRAM: "Program",
    NodeType.VAR_DECL: "VariableDeclaration",
    NodeType.EXPR_STMT: "ExpressionStatement",
    NodeType.CALL_EXPR: "CallExpression",
    NodeType.IDENTIFIER: "Identifier",
    NodeType.NUMERIC_LITERAL: "NumericLiteral",
    NodeType.STRING_LITERAL: "StringLiteral",
}


def _children(node: ASTNode) -> Iterator[Tuple[str, ASTNode]]:
    match node:
        case ProgramNode(body=stmts):
            for i, stmt in enumerate(stmts):
                yield f"stmt[{i}]", stmt
        case VariableDeclarationNode(init=init):
            yield "init", init
        case ExpressionStatementNode(expression=expr):
            yield "expression", expr
        case CallExpressionNode(arguments=args):
            for i, arg in enumerate(args):
                yield f"arg[{i}]", arg


def _label(node: ASTNode) -> str:
    kind = NODE_LABELS.get(node.type, str(node.type))
    match node:
        case VariableDeclarationNode(id=name):
            return f"{kind}\\n{name}"
        case CallExpressionNode(callee=callee):
            return f"{kind}\\n{callee}"
        case IdentifierNode() | NumericLiteralNode() | StringLiteralNode():
            return f"{kind}\\n{PrettyPrinter.print_surface(node)}"
    return kind


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", style="rounded", fontsize="10")

    # Node ids are assigned in pre-order so the output is stable.
    counter = 0
    stack = [(None, "", node)]
    while stack:
        parent_id, edge_label, current = stack.pop()
        node_id = f"n{counter}"
        counter += 1

        children = list(_children(current))
        dot.node(node_id, label=_label(current), shape="box" if children else "ellipse")
        if parent_id is not None:
            dot.edge(parent_id, node_id, label=edge_label, fontsize="8")

        for name, child in reversed(children):
            stack.append((node_id, name, child))

    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> str:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz). Returns the path of the rendered file."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
