"""
Token Types and Reserved Words
==============================

This module holds the lexical vocabulary of the Pascal-like language:
the closed set of token types, the immutable Token value, and the
reserved-word table the lexer consults when it finishes an identifier.

Token Categories
----------------
- Keywords: PROGRAM, VAR, DIV, INTEGER, REAL, BEGIN, END, PROCEDURE
- Identifiers: names made of ASCII letters and digits
- Literals: integers (123) and reals (12.5)
- Operators: + - * / :=
- Delimiters: , . : ; ( )

Keywords are matched case-insensitively; identifiers keep their spelling.

Example
-------
>>> token = Token(TokenType.PLUS, "+")
>>> str(token)
'Token(PLUS, +)'
>>> token.is_type(TokenType.PLUS)
True
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


TokenValue = Union[str, int, float, None]


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Pascal-like language.

    Each member's value is its tag spelling, so ``TokenType.PLUS.value``
    is ``"PLUS"``.
    """

    # === Arithmetic Operators ===
    PLUS = "PLUS"                           # +
    MINUS = "MINUS"                         # -
    ASTERISK = "ASTERISK"                   # *
    SLASH = "SLASH"                         # /
    BACKSLASH = "BACKSLASH"                 # \ (never produced)

    # === Delimiters ===
    COMMA = "COMMA"                         # ,
    DOT = "DOT"                             # .
    COLON = "COLON"                         # :
    SEMICOLON = "SEMICOLON"                 # ;
    LEFT_PARENTHESIS = "LEFT_PARENTHESIS"   # (
    RIGHT_PARENTHESIS = "RIGHT_PARENTHESIS"  # )
    ASSIGN = "ASSIGN"                       # :=

    # === Structural ===
    EOF = "EOF"                             # End of input

    # === Keywords ===
    BEGIN = "BEGIN"
    END = "END"
    PROGRAM = "PROGRAM"
    VAR = "VAR"
    PROCEDURE = "PROCEDURE"
    INTEGER_TYPE = "INTEGER_TYPE"           # INTEGER
    REAL_TYPE = "REAL_TYPE"                 # REAL
    INTEGER_DIV = "INTEGER_DIV"             # DIV
    REAL_DIV = "REAL_DIV"                   # never produced

    # === Identifiers and Literals ===
    IDENTIFIER = "IDENTIFIER"
    INTEGER_LITERAL = "INTEGER_LITERAL"
    REAL_LITERAL = "REAL_LITERAL"


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit: a type tag and an optional value.

    Tokens are immutable. The value is None only for EOF; keywords and
    punctuation carry their text, literals carry their parsed number.

    Attributes:
        type: The TokenType classification
        value: Text for identifiers and punctuation, int or float for literals
    """
    type: TokenType
    value: TokenValue

    @classmethod
    def create(cls, token_type: TokenType, value: TokenValue) -> "Token":
        """Create a token. No validation is performed."""
        return cls(token_type, value)

    def get_type(self) -> TokenType:
        return self.type

    def get_value(self) -> TokenValue:
        return self.value

    def is_type(self, token_type: TokenType) -> bool:
        """Return True if this token has the given type."""
        return self.type is token_type

    def __str__(self) -> str:
        """Format as Token(<type>, <value>) for debugging output."""
        return f"Token({self.type.value}, {self.value})"

    __repr__ = __str__


# =============================================================================
# Reserved Words
# =============================================================================

# Uppercase spelling -> shared keyword token. Values follow the tag names
# for the type keywords (INTEGER -> "INTEGER_TYPE").
RESERVED_WORDS: Mapping[str, Token] = MappingProxyType({
    "PROGRAM": Token(TokenType.PROGRAM, "PROGRAM"),
    "VAR": Token(TokenType.VAR, "VAR"),
    "DIV": Token(TokenType.INTEGER_DIV, "DIV"),
    "INTEGER": Token(TokenType.INTEGER_TYPE, "INTEGER_TYPE"),
    "REAL": Token(TokenType.REAL_TYPE, "REAL_TYPE"),
    "BEGIN": Token(TokenType.BEGIN, "BEGIN"),
    "END": Token(TokenType.END, "END"),
    "PROCEDURE": Token(TokenType.PROCEDURE, "PROCEDURE"),
})
