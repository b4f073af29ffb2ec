"""Token types of the TINY language and their listing format."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    """Every kind of token the scanner can produce."""

    # book-keeping tokens
    ENDFILE = enum.auto()
    ERROR = enum.auto()
    # reserved words
    IF = enum.auto()
    THEN = enum.auto()
    ELSE = enum.auto()
    END = enum.auto()
    REPEAT = enum.auto()
    UNTIL = enum.auto()
    READ = enum.auto()
    WRITE = enum.auto()
    # multicharacter tokens
    ID = enum.auto()
    NUM = enum.auto()
    # special symbols
    ASSIGN = enum.auto()
    EQ = enum.auto()
    LT = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    TIMES = enum.auto()
    OVER = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    SEMI = enum.auto()


@dataclass(frozen=True)
class Token:
    """A recognised token, its lexeme and the line it ended on."""

    type: TokenType
    lexeme: str = ""
    lineno: int = 0


_RESERVED_WORDS = {
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "else": TokenType.ELSE,
    "end": TokenType.END,
    "repeat": TokenType.REPEAT,
    "until": TokenType.UNTIL,
    "read": TokenType.READ,
    "write": TokenType.WRITE,
}

_RESERVED_TYPES = frozenset(_RESERVED_WORDS.values())

_SYMBOLS = {
    TokenType.ASSIGN: ":=",
    TokenType.LT: "<",
    TokenType.EQ: "=",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.SEMI: ";",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.TIMES: "*",
    TokenType.OVER: "/",
    TokenType.ENDFILE: "EOF",
}


def reserved_lookup(lexeme: str) -> TokenType:
    """Return the reserved-word token for ``lexeme``, or ``TokenType.ID``."""
    return _RESERVED_WORDS.get(lexeme, TokenType.ID)


def format_token(token_type: TokenType, lexeme: str) -> str:
    """Describe a token the way the listing shows it (without a newline)."""
    if token_type in _RESERVED_TYPES:
        return f"reserved word: {lexeme}"
    if token_type in _SYMBOLS:
        return _SYMBOLS[token_type]
    if token_type is TokenType.NUM:
        return f"NUM, val= {lexeme}"
    if token_type is TokenType.ID:
        return f"ID, name= {lexeme}"
    if token_type is TokenType.ERROR:
        return f"ERROR: {lexeme}"
    return f"Unknown token: {token_type}"