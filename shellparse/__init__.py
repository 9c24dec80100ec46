"""Lexer and parser for a small shell-like command language."""

__version__ = "0.0.1"
__all__ = ["errors", "lexer", "parser"]