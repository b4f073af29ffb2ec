# tinyparse

A scanner and parser for TINY, the small teaching language with `if`, `repeat`,
`read`, `write` and `:=`. It reads a TINY program, echoes the source with line
numbers, traces every token it recognises and prints the syntax tree it builds.

## Installing

    pip install .

For running the tests:

    pip install .[test]
    pytest

## Command line

    tinyparse sample.tny

Exactly one file name is expected. If the name contains no `.`, `.tny` is
appended. The listing goes to standard output: a `COMPILATION:` header, each
source line echoed with its line number, each token traced as it is
recognised, then the syntax tree:

    COMPILATION: sample.tny
       1: read x;
    	1: reserved word: read
    	1: ID, name= x
    	1: ;
    ...
    Syntax tree:
      Read: x
      ...

Syntax errors are reported in the listing as
`>>> Syntax error at line N: ...`, and parsing continues; the tree built so far
is still printed. The command exits with status 1 when it is given the wrong
number of arguments or the file cannot be opened, and 0 otherwise.

## A TINY program

    { sample program: factorial }
    read x;
    if 0 < x then
      fact := 1;
      repeat
        fact := fact * x;
        x := x - 1
      until x = 0;
      write fact
    end

Comments are enclosed in `{ }`. Identifiers are made of letters only, numbers
of digits only, and a lexeme longer than 40 characters is cut to its first 40.
Any character the language does not know becomes an `ERROR` token.

## Library use

Token by token (module `tinyparse.scanner`, `tinyparse.tokens`):

```python
from tinyparse.scanner import scan
from tinyparse.tokens import TokenType

for token in scan("x := 3 + 4"):
    print(token.type, token.lexeme, token.lineno)
```

`scan` returns a list of `Token` values ending with the one whose type is
`TokenType.ENDFILE`. `Scanner(source, listing=None, echo_source=False,
trace_lex=False)` gives the same tokens one at a time through `next_token()`
or by iteration; `source` is program text or a readable text stream, and with
a `listing` stream it can echo source lines and trace each token.
`reserved_lookup` returns the reserved-word token type for a word, or
`TokenType.ID`, and `format_token` renders a token as it appears in the trace.

Building and printing a syntax tree (module `tinyparse.parser`,
`tinyparse.syntax_tree`):

```python
import io
from tinyparse.parser import parse
from tinyparse.syntax_tree import format_tree

listing = io.StringIO()
tree = parse("read x; write x * 2", listing)
print(format_tree(tree))
```

`parse` writes only syntax error reports to `listing`. For error details,
use `Parser` with a scanner of your own: after `Parser(scanner, listing).parse()`
the parser's `errors` list holds each message and `has_errors` tells whether
there were any.

The tree is made of `TreeNode` objects. Each node has a `nodekind`
(`NodeKind.STMT` or `NodeKind.EXP`), a `kind` (`StmtKind` or `ExpKind`), a
`lineno`, up to three `children` and a next `sibling`; `op`, `value` or `name`
holds its attribute. `TreeNode.siblings()` walks a statement sequence, and
`format_tree` renders a tree with two spaces of indentation per level.

## What it does not do

The package stops at the syntax tree. It has no symbol table, no type
checking and no code generation: `TreeNode.type` (an `ExpType`) exists but the
parser always leaves it as `ExpType.VOID`, and nothing runs a TINY program.