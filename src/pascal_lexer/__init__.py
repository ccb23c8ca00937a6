"""
pascal_lexer - Scanner for a Small Pascal-like Language
=======================================================

This package turns the source text of a small Pascal-like language into
a stream of typed tokens for a parser to consume.

Main Components
---------------
- **tokens**: TokenType, Token and the reserved-word table
- **lexer**: the Lexer state machine and the tokenize() helper
- **errors**: LexicalError and the rest of the exception hierarchy
- **cli**: the pascal-lex command, which prints the tokens of a file

Quick Start
-----------
    >>> from pascal_lexer import Lexer, TokenType
    >>> lexer = Lexer("BEGIN x := 2 END.")
    >>> token = lexer.get_next_token()
    >>> token.is_type(TokenType.BEGIN)
    True

Or from the command line:
    $ pascal-lex example.pas
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from pascal_lexer.errors import (
    PascalLexerError,
    SourceLocation,
    LexicalError,
    UnexpectedCharacterError,
    UnterminatedCommentError,
)
from pascal_lexer.tokens import Token, TokenType, RESERVED_WORDS
from pascal_lexer.lexer import Lexer, LexerOptions, ScanResult, tokenize

__all__ = [
    # Version info
    "__version__",
    # Tokens
    "Token",
    "TokenType",
    "RESERVED_WORDS",
    # Lexer
    "Lexer",
    "LexerOptions",
    "ScanResult",
    "tokenize",
    # Exception hierarchy
    "PascalLexerError",
    "SourceLocation",
    "LexicalError",
    "UnexpectedCharacterError",
    "UnterminatedCommentError",
]
