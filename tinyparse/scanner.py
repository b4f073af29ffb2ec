"""Lexical analysis of TINY source text."""

from __future__ import annotations

import enum
import io
from collections.abc import Iterator
from typing import TextIO

from .tokens import Token, TokenType, format_token, reserved_lookup

MAX_TOKEN_LEN = 40

_SPACE = frozenset(" \t\n\r\v\f")
_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")

_SINGLE_CHAR_TOKENS = {
    "<": TokenType.LT,
    "=": TokenType.EQ,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.TIMES,
    "/": TokenType.OVER,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ";": TokenType.SEMI,
}


class _State(enum.Enum):
    START = enum.auto()
    IN_ASSIGN = enum.auto()
    IN_COMMENT = enum.auto()
    IN_NUM = enum.auto()
    IN_ID = enum.auto()
    DONE = enum.auto()


class Scanner:
    """Turns TINY source text into tokens, one at a time.

    ``source`` is either the program text or a readable text stream.
    With a ``listing`` stream, source lines can be echoed and each
    token traced as it is recognised.
    """

    def __init__(
        self,
        source: str | TextIO,
        listing: TextIO | None = None,
        echo_source: bool = False,
        trace_lex: bool = False,
    ) -> None:
        self._source = io.StringIO(source) if isinstance(source, str) else source
        self._listing = listing
        self.echo_source = echo_source
        self.trace_lex = trace_lex
        self.lineno = 0
        self._line = ""
        self._pos = 0
        self._eof = False

    def _write(self, text: str) -> None:
        if self._listing is not None:
            self._listing.write(text)

    def _next_char(self) -> str:
        """Return the next character, or '' at end of input."""
        if self._pos >= len(self._line):
            self.lineno += 1
            line = self._source.readline()
            if not line:
                self._eof = True
                return ""
            if self.echo_source:
                self._write(f"{self.lineno:4d}: {line}")
            self._line = line
            self._pos = 0
        char = self._line[self._pos]
        self._pos += 1
        return char

    def _unget_char(self) -> None:
        if not self._eof:
            self._pos -= 1

    def next_token(self) -> Token:
        """Recognise and return the next token of the source."""
        lexeme: list[str] = []
        state = _State.START
        token_type = TokenType.ERROR
        while state is not _State.DONE:
            char = self._next_char()
            save = True
            if state is _State.START:
                if char in _SPACE:
                    save = False
                elif char == ":":
                    state = _State.IN_ASSIGN
                elif char == "{":
                    save = False
                    state = _State.IN_COMMENT
                elif char in _DIGITS:
                    state = _State.IN_NUM
                elif char in _LETTERS:
                    state = _State.IN_ID
                elif char == "":
                    save = False
                    state = _State.DONE
                    token_type = TokenType.ENDFILE
                else:
                    state = _State.DONE
                    token_type = _SINGLE_CHAR_TOKENS.get(char, TokenType.ERROR)
            elif state is _State.IN_ASSIGN:
                state = _State.DONE
                if char == "=":
                    token_type = TokenType.ASSIGN
                else:
                    self._unget_char()
                    save = False
                    token_type = TokenType.ERROR
            elif state is _State.IN_COMMENT:
                save = False
                if char == "}":
                    state = _State.START
                elif char == "":
                    state = _State.DONE
                    token_type = TokenType.ENDFILE
            elif state is _State.IN_NUM:
                if char not in _DIGITS:
                    self._unget_char()
                    save = False
                    state = _State.DONE
                    token_type = TokenType.NUM
            elif state is _State.IN_ID:
                if char not in _LETTERS:
                    self._unget_char()
                    save = False
                    state = _State.DONE
                    token_type = TokenType.ID
            if save and len(lexeme) < MAX_TOKEN_LEN:
                lexeme.append(char)

        text = "".join(lexeme)
        if token_type is TokenType.ID:
            token_type = reserved_lookup(text)
        if self.trace_lex:
            self._write(f"\t{self.lineno}: {format_token(token_type, text)}\n")
        return Token(token_type, text, self.lineno)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the end-of-file token."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.ENDFILE:
                return


def scan(source: str | TextIO) -> list[Token]:
    """Return every token of ``source``, ending with ``ENDFILE``."""
    return list(Scanner(source))