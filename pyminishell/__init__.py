"""Lexer, parser, variable expansion, environment and builtins for a small shell."""

__version__ = "0.1.0"