"""
Parser for the varscript language.

Overview and approach:
- This parser is a small hand-written recursive descent parser with a single
    token of lookahead. It does not take a token list: it owns a `Lexer` and
    pulls the next token from it whenever the current one is consumed, so only
    one token is alive at any time.
- Each grammar rule is one method:

        Program    := Statement*
        Statement  := VarDecl | ExprStmt
        VarDecl    := "var" IDENTIFIER "=" Expression
        ExprStmt   := Expression
        Expression := IDENTIFIER | Call | NUMBER | STRING
        Call       := IDENTIFIER "(" (Expression ("," Expression)*)? ")"

Key points:
- `parse_statement()` dispatches on the current token: the `var` keyword
    starts a declaration, an identifier starts an expression statement, and
    anything else is an error.
- `parse_expression()` always consumes the token it dispatches on; an
    identifier directly followed by `(` becomes a call expression.
- A call may have no arguments (`f()`); a trailing comma is rejected.
- A token that cannot start an expression (`)`, `=`, `,`, a keyword, or the
    end of input) is a syntax error rather than an empty expression.

Errors:
- The first problem raises `ScriptSyntaxError`; there is no recovery and no
    partial tree.

Examples:
    Parser('var abc = "abc"\\nalert(abc, 246)').parse_program()
"""

from __future__ import annotations
from typing import List, Optional
from tokens import Token, TokenType
from lexer import Lexer
from errors import ScriptSyntaxError
from ast_nodes import *


class Parser:
    def __init__(self, text: str):
        self.lexer = Lexer(text)
        self.current: Optional[Token] = None

    def error(self, message: str, token: Optional[Token] = None) -> ScriptSyntaxError:
        token = token or self.current
        return ScriptSyntaxError(message, token.value, token.line, token.column)

    def peek(self) -> Token:
        """Return the current token without consuming it."""
        if self.current is None:
            return self.advance()
        return self.current

    def advance(self) -> Token:
        """Move to next token."""
        self.current = self.lexer.get_next_token()
        return self.current

    def expect(self, expected_type: TokenType, message: Optional[str] = None) -> Token:
        """Expect and consume token of given type."""
        token = self.peek()
        if token.type == expected_type:
            self.advance()
            return token

        msg = message or f"Expected {expected_type}, got {self.current.type}"
        raise self.error(msg)

    def parse_call_arguments(self) -> List[Expression]:
        """Parse call arguments after the opening parenthesis, up to and including `)`."""
        args: List[Expression] = []

        if self.current.type == TokenType.PAREN_R:
            self.advance()
            return args

        while True:
            args.append(self.parse_expression())
            match self.current.type:
                case TokenType.COMMA:
                    self.advance()
                case TokenType.PAREN_R:
                    self.advance()
                    return args
                case _:
                    raise self.error(
                        f"Expected ',' or ')' after argument, got {self.current.type}"
                    )

    def parse_expression(self) -> Expression:
        """Parse an expression."""
        token = self.peek()

        match token.type:
            case TokenType.IDENTIFIER:
                self.advance()
                if self.current.type == TokenType.PAREN_L:
                    self.advance()  # Consume '('
                    args = self.parse_call_arguments()
                    return CallExpressionNode(callee=token.value, arguments=tuple(args))
                return IdentifierNode(name=token.value)

            case TokenType.NUMBER:
                self.advance()
                return NumericLiteralNode(value=token.value)

            case TokenType.STRING:
                self.advance()
                return StringLiteralNode(value=token.value)

            case TokenType.EOF:
                raise self.error("Unexpected end of input, expected an expression")

            case _:
                raise self.error(f"Unexpected token {token.lexeme!r}, expected an expression")

    def parse_variable_declaration(self) -> VariableDeclarationNode:
        """Parse variable declaration: var identifier = expression"""
        self.expect(TokenType.KEYWORD)

        name_token = self.expect(TokenType.IDENTIFIER, "Expected variable name after 'var'")
        self.expect(TokenType.EQ, f"Expected '=' after variable name '{name_token.value}'")
        init = self.parse_expression()

        return VariableDeclarationNode(id=name_token.value, init=init)

    def parse_statement(self) -> Statement:
        """Parse a statement."""
        token = self.peek()

        match token.type:
            case TokenType.KEYWORD:
                if token.value == "var":
                    return self.parse_variable_declaration()
                raise self.error(f"Unsupported keyword {token.value!r}")

            case TokenType.IDENTIFIER:
                return ExpressionStatementNode(expression=self.parse_expression())

            case _:
                raise self.error(f"Unexpected token {token.lexeme!r}")

    def parse_program(self) -> ProgramNode:
        """Parse a complete program (sequence of statements)."""
        statements: List[Statement] = []

        self.peek()  # read the first token unless already done
        try:
            while self.current.type != TokenType.EOF:
                statements.append(self.parse_statement())
        except RecursionError:
            # Call nesting deeper than the interpreter recursion limit.
            raise self.error("Expression nested too deeply") from None

        return ProgramNode(body=tuple(statements))

    def parse(self) -> ProgramNode:
        """Parse the whole source text."""
        return self.parse_program()
