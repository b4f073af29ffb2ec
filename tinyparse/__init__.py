"""Scanner, recursive-descent parser and syntax tree listing for the TINY language."""

__version__ = "0.1.0"
__all__ = ["tokens", "scanner", "syntax_tree", "parser", "cli"]