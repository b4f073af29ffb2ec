"""Recursive-descent parser building syntax trees for TINY programs."""

from __future__ import annotations

from typing import TextIO

from .scanner import Scanner
from .syntax_tree import ExpKind, StmtKind, TreeNode
from .tokens import Token, TokenType, format_token

_SEQUENCE_END = frozenset(
    {TokenType.ENDFILE, TokenType.END, TokenType.ELSE, TokenType.UNTIL}
)
_COMPARISON_OPS = frozenset({TokenType.LT, TokenType.EQ})
_ADD_OPS = frozenset({TokenType.PLUS, TokenType.MINUS})
_MUL_OPS = frozenset({TokenType.TIMES, TokenType.OVER})


class Parser:
    """Builds the syntax tree of a TINY program from a scanner's tokens.

    Syntax errors are reported to ``listing`` and collected in ``errors``;
    parsing recovers and goes on, so a (partial) tree is always returned.
    """

    def __init__(self, scanner: Scanner, listing: TextIO | None = None) -> None:
        self._scanner = scanner
        self._listing = listing
        self._token = Token(TokenType.ENDFILE)
        self.errors: list[str] = []

    @property
    def has_errors(self) -> bool:
        """Whether any syntax error was found."""
        return bool(self.errors)

    def _write(self, text: str) -> None:
        if self._listing is not None:
            self._listing.write(text)

    def _advance(self) -> None:
        self._token = self._scanner.next_token()

    def _syntax_error(self, message: str) -> None:
        lineno = self._scanner.lineno
        self._write(f"\n>>> Syntax error at line {lineno}: {message}")
        self.errors.append(f"Syntax error at line {lineno}: {message.rstrip()}")

    def _report_unexpected(self) -> None:
        self._syntax_error("unexpected token -> ")
        self._write(format_token(self._token.type, self._token.lexeme) + "\n")

    def _match(self, expected: TokenType) -> None:
        if self._token.type is expected:
            self._advance()
        else:
            self._report_unexpected()
            self._write("      ")

    def _new_node(self, kind: StmtKind | ExpKind) -> TreeNode:
        return TreeNode(kind, lineno=self._scanner.lineno)

    def _stmt_sequence(self) -> TreeNode | None:
        first = self._statement()
        last = first
        while self._token.type not in _SEQUENCE_END:
            self._match(TokenType.SEMI)
            node = self._statement()
            if node is None:
                continue
            if first is None:
                first = last = node
            else:
                last.sibling = node
                last = node
        return first

    def _statement(self) -> TreeNode | None:
        handlers = {
            TokenType.IF: self._if_stmt,
            TokenType.REPEAT: self._repeat_stmt,
            TokenType.ID: self._assign_stmt,
            TokenType.READ: self._read_stmt,
            TokenType.WRITE: self._write_stmt,
        }
        handler = handlers.get(self._token.type)
        if handler is not None:
            return handler()
        self._report_unexpected()
        self._advance()
        return None

    def _if_stmt(self) -> TreeNode:
        node = self._new_node(StmtKind.IF)
        self._match(TokenType.IF)
        node.children.append(self._exp())
        self._match(TokenType.THEN)
        node.children.append(self._stmt_sequence())
        if self._token.type is TokenType.ELSE:
            self._match(TokenType.ELSE)
            node.children.append(self._stmt_sequence())
        self._match(TokenType.END)
        return node

    def _repeat_stmt(self) -> TreeNode:
        node = self._new_node(StmtKind.REPEAT)
        self._match(TokenType.REPEAT)
        node.children.append(self._stmt_sequence())
        self._match(TokenType.UNTIL)
        node.children.append(self._exp())
        return node

    def _assign_stmt(self) -> TreeNode:
        node = self._new_node(StmtKind.ASSIGN)
        if self._token.type is TokenType.ID:
            node.name = self._token.lexeme
        self._match(TokenType.ID)
        self._match(TokenType.ASSIGN)
        node.children.append(self._exp())
        return node

    def _read_stmt(self) -> TreeNode:
        node = self._new_node(StmtKind.READ)
        self._match(TokenType.READ)
        if self._token.type is TokenType.ID:
            node.name = self._token.lexeme
        self._match(TokenType.ID)
        return node

    def _write_stmt(self) -> TreeNode:
        node = self._new_node(StmtKind.WRITE)
        self._match(TokenType.WRITE)
        node.children.append(self._exp())
        return node

    def _binary(self, left: TreeNode | None, operand) -> TreeNode:
        node = self._new_node(ExpKind.OP)
        node.op = self._token.type
        node.children.append(left)
        self._match(self._token.type)
        node.children.append(operand())
        return node

    def _exp(self) -> TreeNode | None:
        node = self._simple_exp()
        if self._token.type in _COMPARISON_OPS:
            node = self._binary(node, self._simple_exp)
        return node

    def _simple_exp(self) -> TreeNode | None:
        node = self._term()
        while self._token.type in _ADD_OPS:
            node = self._binary(node, self._term)
        return node

    def _term(self) -> TreeNode | None:
        node = self._factor()
        while self._token.type in _MUL_OPS:
            node = self._binary(node, self._factor)
        return node

    def _factor(self) -> TreeNode | None:
        token_type = self._token.type
        if token_type is TokenType.NUM:
            node = self._new_node(ExpKind.CONST)
            node.value = int(self._token.lexeme)
            self._match(TokenType.NUM)
            return node
        if token_type is TokenType.ID:
            node = self._new_node(ExpKind.ID)
            node.name = self._token.lexeme
            self._match(TokenType.ID)
            return node
        if token_type is TokenType.LPAREN:
            self._match(TokenType.LPAREN)
            node = self._exp()
            self._match(TokenType.RPAREN)
            return node
        self._report_unexpected()
        self._advance()
        return None

    def parse(self) -> TreeNode | None:
        """Parse the whole program and return its syntax tree."""
        self._advance()
        tree = self._stmt_sequence()
        if self._token.type is not TokenType.ENDFILE:
            self._syntax_error("Code ends before file\n")
        return tree


def parse(source: str | TextIO, listing: TextIO | None = None) -> TreeNode | None:
    """Parse TINY ``source`` text or stream and return its syntax tree."""
    return Parser(Scanner(source), listing).parse()