"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/strings describing the AST node, using ESTree-style names
(`Program.body`, `VariableDeclaration.id/init`, `CallExpression.callee/
arguments`, ...). `ast_to_json_str(node)` returns the same data as JSON text.
"""

import json
from typing import Any, Dict
from ast_nodes import *


def ast_to_json(node: ASTNode) -> Dict[str, Any]:
    match node:
        case ProgramNode(body=body):
            return {"type": "Program", "body": [ast_to_json(s) for s in body]}
        case VariableDeclarationNode(id=name, init=init):
            return {
                "type": "VariableDeclaration",
                "id": name,
                "init": ast_to_json(init),
            }
        case ExpressionStatementNode(expression=expr):
            return {"type": "ExpressionStatement", "expression": ast_to_json(expr)}
        case CallExpressionNode(callee=callee, arguments=args):
            return {
                "type": "CallExpression",
                "callee": callee,
                "arguments": [ast_to_json(a) for a in args],
            }
        case IdentifierNode(name=name):
            return {"type": "Identifier", "name": name}
        case NumericLiteralNode(value=v):
            return {"type": "NumericLiteral", "value": v}
        case StringLiteralNode(value=v):
            return {"type": "StringLiteral", "value": v}

    raise TypeError(f"Cannot serialize {type(node).__name__}")


def ast_to_json_str(node: ASTNode, indent: int = 2) -> str:
    return json.dumps(ast_to_json(node), indent=indent, ensure_ascii=False)
