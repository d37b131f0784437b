"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small `Token` dataclass that holds a token type, the exact
source text it was scanned from, and the position of its first character.
Tokens are transient: the parser looks at one at a time and drops it as soon
as the next one is read.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    # Literals
    NUMBER = auto()
    STRING = auto()
    IDENTIFIER = auto()

    # Reserved words (see `lexer.KEYWORDS`)
    KEYWORD = auto()

    # Punctuation
    EQ = auto()
    PAREN_L = auto()
    PAREN_R = auto()
    COMMA = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[str] = None
    line: int = 0
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return str(self.type)
        return self.value
