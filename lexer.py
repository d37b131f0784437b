"""
Lexer for the varscript language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into `Token` objects defined in
    `tokens.py`, one token per call to `get_next_token()`.
- It recognizes the reserved word `var`, identifiers (ASCII letters only),
    integer literals (ASCII digits only), double-quoted strings and the
    punctuation `=`, `(`, `)` and `,`. Whitespace (space, tab, CR, LF) is
    skipped; there are no comments.

Examples:
    Input:  'var abc = "abc"'
    Tokens: [KEYWORD('var'), IDENTIFIER('abc'), EQ('='), STRING('abc'), EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and
    `self.current_char`; the last token produced is kept in
    `self.current_token`. There is no pushback.
- Identifiers are scanned and then checked against `KEYWORDS`, so adding a
    reserved word does not need a new scanning state.
- String literals are taken verbatim: no escape sequences, and a missing
    closing quote simply ends the string at end of input.
- Once the input is exhausted every call returns an EOF token.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import Token, TokenType
from errors import ScriptSyntaxError

KEYWORDS = frozenset({"var"})

WHITESPACE = frozenset(" \r\n\t")

PUNCTUATION = {
    "=": TokenType.EQ,
    "(": TokenType.PAREN_L,
    ")": TokenType.PAREN_R,
    ",": TokenType.COMMA,
}


def is_digit(char: Optional[str]) -> bool:
    return char is not None and "0" <= char <= "9"


def is_letter(char: Optional[str]) -> bool:
    return char is not None and ("A" <= char <= "Z" or "a" <= char <= "z")


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None
        self.current_token: Optional[Token] = None

    def error(self, char: str) -> ScriptSyntaxError:
        return ScriptSyntaxError(
            f"Unexpected character {char!r}", char, self.line, self.column
        )

    def advance(self) -> None:
        """Advance to next character."""
        # Newlines reset the column and increment the line number.
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and self.current_char in WHITESPACE:
            self.advance()

    def number(self) -> str:
        """Scan a run of digits. No sign, fraction or exponent."""
        result = []
        while is_digit(self.current_char):
            result.append(self.current_char)
            self.advance()
        return "".join(result)

    def word(self) -> str:
        """Scan a run of letters (identifier or keyword)."""
        result = []
        while is_letter(self.current_char):
            result.append(self.current_char)
            self.advance()
        return "".join(result)

    def string(self) -> str:
        """Scan a double-quoted string body; the quotes are not included."""
        self.advance()  # opening quote
        result = []
        while self.current_char is not None and self.current_char != '"':
            result.append(self.current_char)
            self.advance()

        if self.current_char == '"':
            self.advance()

        return "".join(result)

    def _emit(self, token: Token) -> Token:
        self.current_token = token
        return token

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        self.skip_whitespace()

        line, column = self.line, self.column
        char = self.current_char

        if char is None:
            return self._emit(Token(TokenType.EOF, None, line, column))

        if is_digit(char):
            return self._emit(Token(TokenType.NUMBER, self.number(), line, column))

        if is_letter(char):
            text = self.word()
            token_type = TokenType.KEYWORD if text in KEYWORDS else TokenType.IDENTIFIER
            return self._emit(Token(token_type, text, line, column))

        if char == '"':
            return self._emit(Token(TokenType.STRING, self.string(), line, column))

        token_type = PUNCTUATION.get(char)
        if token_type is not None:
            self.advance()
            return self._emit(Token(token_type, char, line, column))

        # If we reach here, the character is not recognized.
        raise self.error(char)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
