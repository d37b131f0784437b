"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which renders it back into source syntax. The tree dump is intended for
debugging, tests and development; the surface form parses back into an equal
tree.

Examples:
    PrettyPrinter.print_ast(program_node)
    PrettyPrinter.print_surface(program_node)
"""

from __future__ import annotations
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        match node:
            case NumericLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}NumericLiteral({v})")

            case StringLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}StringLiteral({v!r})")

            case IdentifierNode(name=n):
                lines.append(f"{indent_str}{prefix}Identifier({n})")

            case CallExpressionNode(callee=callee, arguments=args):
                lines.append(f"{indent_str}{prefix}CallExpression({callee})")
                for i, arg in enumerate(args):
                    lines.append(PrettyPrinter.print_ast(arg, indent + 4, f"arg[{i}]: "))

            case ExpressionStatementNode(expression=expr):
                lines.append(f"{indent_str}{prefix}ExpressionStatement")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2))

            case VariableDeclarationNode(id=name, init=init):
                lines.append(f"{indent_str}{prefix}VariableDeclaration({name})")
                lines.append(PrettyPrinter.print_ast(init, indent + 2, "init: "))

            case ProgramNode(body=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                raise TypeError(f"Cannot print {type(node).__name__}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return the source-syntax representation of an AST node.

        Statements of a program are put on separate lines.
        """
        if node is None:
            return ""

        _p = PrettyPrinter.print_surface

        match node:
            case NumericLiteralNode(value=v):
                return v
            case StringLiteralNode(value=v):
                return f'"{v}"'
            case IdentifierNode(name=n):
                return n
            case CallExpressionNode(callee=callee, arguments=args):
                args_s = ", ".join(_p(a) for a in args)
                return f"{callee}({args_s})"
            case ExpressionStatementNode(expression=expr):
                return _p(expr)
            case VariableDeclarationNode(id=name, init=init):
                return f"var {name} = {_p(init)}"
            case ProgramNode(body=stmts):
                return "\n".join(_p(s) for s in stmts)
            case _:
                raise TypeError(f"Cannot print {type(node).__name__}")
