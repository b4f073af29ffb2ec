"""Command line entry point: parse a TINY file and print its syntax tree."""

from __future__ import annotations

import sys

from .parser import Parser
from .scanner import Scanner
from .syntax_tree import format_tree

_DEFAULT_EXTENSION = ".tny"


def main(argv: list[str] | None = None) -> int:
    """Run the parser on the file named in ``argv`` and return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("usage: tinyparse <filename>", file=sys.stderr)
        return 1
    program = args[0]
    if "." not in program:
        program += _DEFAULT_EXTENSION
    try:
        source = open(program, encoding="utf-8")
    except OSError:
        print(f"File {program} not found", file=sys.stderr)
        return 1
    listing = sys.stdout
    with source:
        listing.write(f"\nCOMPILATION: {program}\n")
        scanner = Scanner(source, listing, echo_source=True, trace_lex=True)
        tree = Parser(scanner, listing).parse()
        listing.write("\nSyntax tree:\n")
        listing.write(format_tree(tree))
    return 0


if __name__ == "__main__":
    sys.exit(main())