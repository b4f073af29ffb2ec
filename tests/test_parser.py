import io

from tinyparse.parser import Parser, parse
from tinyparse.scanner import Scanner
from tinyparse.syntax_tree import ExpKind, StmtKind, format_tree
from tinyparse.tokens import TokenType


def _parser(text):
    listing = io.StringIO()
    return Parser(Scanner(text), listing), listing


def test_read_then_write_sequence():
    tree = parse("read x; write x")
    nodes = list(tree.siblings())
    assert [node.kind for node in nodes] == [StmtKind.READ, StmtKind.WRITE]
    assert nodes[0].name == "x"
    assert nodes[1].children[0].kind is ExpKind.ID
    assert nodes[1].children[0].name == "x"


def test_format_of_simple_program():
    tree = parse("read x; write x")
    assert format_tree(tree) == "  Read: x\n  Write\n    Id: x\n"


def test_multiplication_binds_tighter_than_addition():
    tree = parse("x := 1 + 2 * 3")
    assert tree.kind is StmtKind.ASSIGN
    assert tree.name == "x"
    top = tree.children[0]
    assert top.op is TokenType.PLUS
    assert top.children[0].value == 1
    right = top.children[1]
    assert right.op is TokenType.TIMES
    assert [c.value for c in right.children] == [2, 3]


def test_subtraction_is_left_associative():
    top = parse("x := 1 - 2 - 3").children[0]
    assert top.op is TokenType.MINUS
    assert top.children[1].value == 3
    left = top.children[0]
    assert left.op is TokenType.MINUS
    assert [c.value for c in left.children] == [1, 2]


def test_parentheses_override_precedence():
    top = parse("x := (1 + 2) * 3").children[0]
    assert top.op is TokenType.TIMES
    assert top.children[0].op is TokenType.PLUS
    assert top.children[1].value == 3


def test_if_without_else_has_two_children():
    tree = parse("if x < 1 then write x end")
    assert tree.kind is StmtKind.IF
    assert len(tree.children) == 2
    assert tree.children[0].op is TokenType.LT
    assert tree.children[1].kind is StmtKind.WRITE


def test_if_with_else_has_three_children():
    tree = parse("if x = 0 then write 1 else write 2 end")
    assert len(tree.children) == 3
    assert tree.children[0].op is TokenType.EQ
    assert tree.children[2].children[0].value == 2


def test_repeat_statement():
    tree = parse("repeat x := x - 1 until x = 0")
    assert tree.kind is StmtKind.REPEAT
    body, cond = tree.children
    assert body.kind is StmtKind.ASSIGN
    assert cond.op is TokenType.EQ


def test_clean_program_has_no_errors():
    parser, listing = _parser("read x;\nif 0 < x then write x end")
    tree = parser.parse()
    assert parser.errors == []
    assert not parser.has_errors
    assert listing.getvalue() == ""
    assert len(list(tree.siblings())) == 2


def test_node_line_numbers():
    tree = parse("read x;\nwrite y")
    read, write = tree.siblings()
    assert read.lineno == 1
    assert write.lineno == 2


def test_missing_factor_is_reported():
    parser, listing = _parser("x := ;")
    tree = parser.parse()
    assert parser.has_errors
    assert "Syntax error at line 1: unexpected token -> " in listing.getvalue()
    assert tree.kind is StmtKind.ASSIGN
    assert tree.children == [None]


def test_trailing_tokens_are_reported():
    parser, listing = _parser("x := 1 end")
    parser.parse()
    assert any("Code ends before file" in error for error in parser.errors)
    assert "Code ends before file" in listing.getvalue()


def test_failed_match_reports_found_token():
    parser, listing = _parser("if x then write x")
    parser.parse()
    assert parser.has_errors
    assert "EOF\n" in listing.getvalue()


def test_parse_accepts_stream():
    tree = parse(io.StringIO("read y"))
    assert tree.name == "y"
    assert tree.sibling is None