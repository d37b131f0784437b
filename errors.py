"""Error raised by the lexer and the parser."""

from __future__ import annotations
from typing import Optional


class ScriptSyntaxError(SyntaxError):
    """The first lexical or grammatical error found in a source text.

    `offending` is the character (lexer) or token text (parser) that could
    not be accepted; `line`/`column` locate it when known.
    """

    def __init__(
        self,
        message: str,
        offending: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        if line is not None and column is not None:
            message = f"{message} at line {line}, column {column}"
        super().__init__(message)
        self.offending = offending
        self.line = line
        self.column = column
