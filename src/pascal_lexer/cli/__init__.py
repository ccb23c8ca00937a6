"""
pascal_lexer Command-Line Interface
===================================

- **pascal-lex**: print the token stream of a Pascal source file

The tool is a Click-based CLI application.
"""

__all__ = ["pascal_lex"]
