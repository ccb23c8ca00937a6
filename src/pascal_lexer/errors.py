"""
Pascal Lexer Error Hierarchy
============================

This module defines the exception hierarchy for the lexer package.
All exceptions inherit from PascalLexerError, allowing callers to catch
every package error with a single except clause if desired.

Exception Hierarchy
-------------------
PascalLexerError (base)
└── LexicalError - no token pattern matches the input
    ├── UnexpectedCharacterError - character outside the language
    └── UnterminatedCommentError - '{' without '}' (strict mode only)

Error Message Format
--------------------
Errors carry source location information and follow this format:

    filename:line:column: error: description
        source_line_text
            ^ (pointer to error location)
    hint: suggestion for fixing

Example:
    example.pas:3:7: error: unexpected character '@'
        a := b @ c;
               ^
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class PascalLexerError(Exception):
    """
    Base exception for all pascal_lexer errors.

        try:
            tokens = tokenize(source)
        except PascalLexerError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(PascalLexerError):
    """
    Fatal scanning error.

    Raised by the lexer when the current character cannot start any
    token. There is no recovery: the scan is aborted and the caller
    decides whether to halt or report.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            example.pas:3:7: error: unexpected character '@'
                a := b @ c;
                       ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnexpectedCharacterError(LexicalError):
    """
    Character that cannot begin any token.

    The offending character is kept in ``char`` so tooling can report it
    without parsing the message.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unexpected character '{char}'",
            location=location,
            source_line=source_line,
        )


class UnterminatedCommentError(LexicalError):
    """
    Comment block opened with '{' but never closed.

    Only raised when the lexer runs with strict_comments enabled;
    by default an unterminated comment silently runs to end of input.
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated comment",
            location=location,
            hint="add closing '}' to terminate the comment",
            source_line=source_line,
        )
