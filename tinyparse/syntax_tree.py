"""Syntax tree nodes of the TINY language and their listing format."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field

from .tokens import TokenType, format_token

MAX_CHILDREN = 3


class NodeKind(enum.Enum):
    STMT = enum.auto()
    EXP = enum.auto()


class StmtKind(enum.Enum):
    IF = enum.auto()
    REPEAT = enum.auto()
    ASSIGN = enum.auto()
    READ = enum.auto()
    WRITE = enum.auto()


class ExpKind(enum.Enum):
    OP = enum.auto()
    CONST = enum.auto()
    ID = enum.auto()


class ExpType(enum.Enum):
    """Type of an expression, used for type checking."""

    VOID = enum.auto()
    INTEGER = enum.auto()
    BOOLEAN = enum.auto()


@dataclass(eq=False)
class TreeNode:
    """A statement or expression node with up to three children.

    Statements in a sequence are chained through ``sibling``. Only the
    attribute matching the kind is meaningful: ``op`` for operators,
    ``value`` for constants, ``name`` for identifiers, assignments and reads.
    """

    kind: StmtKind | ExpKind
    lineno: int = 0
    children: list[TreeNode | None] = field(default_factory=list)
    sibling: TreeNode | None = None
    op: TokenType | None = None
    value: int | None = None
    name: str | None = None
    type: ExpType = ExpType.VOID
    nodekind: NodeKind = field(init=False)

    def __post_init__(self) -> None:
        if isinstance(self.kind, StmtKind):
            self.nodekind = NodeKind.STMT
        elif isinstance(self.kind, ExpKind):
            self.nodekind = NodeKind.EXP
        else:
            raise TypeError(f"not a node kind: {self.kind!r}")
        if len(self.children) > MAX_CHILDREN:
            raise ValueError(
                f"a node has at most {MAX_CHILDREN} children, got {len(self.children)}"
            )

    def siblings(self) -> Iterator[TreeNode]:
        """Yield this node and every node chained after it."""
        node: TreeNode | None = self
        while node is not None:
            yield node
            node = node.sibling


_STMT_LABELS = {
    StmtKind.IF: lambda node: "If",
    StmtKind.REPEAT: lambda node: "Repeat",
    StmtKind.ASSIGN: lambda node: f"Assign to: {node.name}",
    StmtKind.READ: lambda node: f"Read: {node.name}",
    StmtKind.WRITE: lambda node: "Write",
}

_EXP_LABELS = {
    ExpKind.OP: lambda node: f"Op: {format_token(node.op, '')}",
    ExpKind.CONST: lambda node: f"Const: {node.value}",
    ExpKind.ID: lambda node: f"Id: {node.name}",
}


def _label(node: TreeNode) -> str:
    if node.nodekind is NodeKind.STMT:
        return _STMT_LABELS[node.kind](node)
    return _EXP_LABELS[node.kind](node)


def _tree_lines(tree: TreeNode | None, indent: int) -> Iterator[str]:
    if tree is None:
        return
    for node in tree.siblings():
        yield " " * indent + _label(node)
        for child in node.children:
            yield from _tree_lines(child, indent + 2)


def format_tree(tree: TreeNode | None) -> str:
    """Render a syntax tree with two-space indentation per level."""
    return "".join(f"{line}\n" for line in _tree_lines(tree, 2))