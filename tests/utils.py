from lexer import Lexer
from parser import Parser
from tokens import TokenType


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def token_pairs(text: str):
    """Return (type, value) pairs for every token before EOF."""
    return [(t.type, t.value) for t in lex(text) if t.type != TokenType.EOF]


def parse_text(text: str):
    """Convenience: lex+parse a source text into a Program AST."""
    return Parser(text).parse_program()
