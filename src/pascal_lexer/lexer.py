"""
Pascal Lexer (Scanner)
======================

This module implements a hand-written scanner for a small Pascal-like
language. It walks the source one character at a time and hands out
one token per call to get_next_token().

Scanning Rules
--------------
Each call to get_next_token() tries these branches in order:

1. Whitespace is skipped (no token)
2. '{' opens a comment that runs to the next '}' (no token)
3. A digit starts an INTEGER_LITERAL or REAL_LITERAL
4. A letter starts an identifier or a reserved word
5. ':=' is ASSIGN (checked with one character of lookahead)
6. ':' alone is COLON
7. , ; . + - * / ( ) are single-character tokens
8. Anything else raises UnexpectedCharacterError

Once the input is exhausted every call returns Token(EOF, None).

Example Usage
-------------
>>> from pascal_lexer.lexer import Lexer
>>> lexer = Lexer("a := 1;")
>>> lexer.get_next_token()
Token(IDENTIFIER, a)
>>> lexer.get_next_token()
Token(ASSIGN, :=)
>>> lexer.get_next_token()
Token(INTEGER_LITERAL, 1)
>>> lexer.get_next_token()
Token(SEMICOLON, ;)
>>> lexer.get_next_token()
Token(EOF, None)
"""

import logging
import string
from dataclasses import dataclass
from typing import Iterator, Optional

from pascal_lexer.errors import (
    LexicalError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedCommentError,
)
from pascal_lexer.tokens import RESERVED_WORDS, Token, TokenType


logger = logging.getLogger(__name__)


# =============================================================================
# Lexer Configuration
# =============================================================================

@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        filename: Name reported in error messages
        strict_comments: Raise UnterminatedCommentError when a '{' comment
                         reaches end of input. When False (default) the
                         comment silently swallows the rest of the input.
    """
    filename: str = "<input>"
    strict_comments: bool = False


# =============================================================================
# Scan Result
# =============================================================================

@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of a single scan step: either a token or a lexical error.

    Returned by Lexer.try_next_token() for callers that prefer to branch
    on a value instead of catching an exception.
    """
    token: Optional[Token] = None
    error: Optional[LexicalError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Token:
        """Return the token, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.token


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes Pascal-like source code.

    The lexer keeps a cursor into the (never modified) input and the
    character under it. current_char is None exactly when the cursor has
    moved past the last character.

    Usage:
        lexer = Lexer(source_text)
        token = lexer.get_next_token()
        while not token.is_type(TokenType.EOF):
            ...
            token = lexer.get_next_token()

    Attributes:
        input: The source code being tokenized
        position: Zero-based cursor into input
        current_char: Character at position, or None past the end
        length: Length of input
    """

    DIGITS = string.digits
    LETTERS = string.ascii_letters
    ALPHANUMERIC = string.ascii_letters + string.digits

    # Single-character punctuation
    SINGLE_TOKENS = {
        ",": TokenType.COMMA,
        ";": TokenType.SEMICOLON,
        ".": TokenType.DOT,
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "*": TokenType.ASTERISK,
        "/": TokenType.SLASH,
        "(": TokenType.LEFT_PARENTHESIS,
        ")": TokenType.RIGHT_PARENTHESIS,
    }

    def __init__(self, input: str, options: Optional[LexerOptions] = None):
        """
        Initialize the lexer with source code.

        Empty input is accepted and yields EOF straight away.

        Args:
            input: Source code of a program
            options: Lexer configuration (defaults to LexerOptions())
        """
        self.options = options or LexerOptions()
        self.input = input
        self.length = len(input)
        self.position = 0
        self.current_char: Optional[str] = input[0] if self.length > 0 else None

        # Line tracking for error reporting
        self._line = 1
        self._column = 1
        self._line_start_pos = 0

        logger.debug(f"Lexer created for {self.options.filename} ({self.length} characters)")

    @property
    def filename(self) -> str:
        return self.options.filename

    @property
    def location(self) -> SourceLocation:
        """Return the SourceLocation of the cursor."""
        return SourceLocation(self.filename, self._line, self._column)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def advance(self) -> None:
        """
        Move the cursor one character forward.

        Past the end of input the cursor stays at length and current_char
        stays None, so repeated calls are harmless.
        """
        if self.position >= self.length:
            self.current_char = None
            return

        if self.current_char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self.position + 1
        else:
            self._column += 1

        self.position += 1

        if self.position > self.length - 1:
            self.current_char = None
        else:
            self.current_char = self.input[self.position]

    def peek(self) -> Optional[str]:
        """
        Return the character after the cursor without moving it.

        Returns None if that would be past the end of input. Used to tell
        ':' apart from ':='.
        """
        position = self.position + 1
        if position > self.length - 1:
            return None
        return self.input[position]

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def skip_whitespace(self) -> None:
        """Advance past consecutive whitespace characters."""
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def skip_comment(self, start: Optional[SourceLocation] = None) -> None:
        """
        Skip the body of a '{ ... }' comment.

        The opening '{' must already be consumed. Advances up to the
        closing '}' and then once more to consume it.

        Args:
            start: Location of the opening '{' (for error reporting)

        Raises:
            UnterminatedCommentError: If input ends before '}' and
                strict_comments is enabled
        """
        while self.current_char is not None and self.current_char != "}":
            self.advance()

        if self.current_char is None:
            location = start or self.location
            if self.options.strict_comments:
                raise UnterminatedCommentError(location, self._get_line_at(location))
            logger.warning(f"{location}: unterminated comment runs to end of input")

        self.advance()

    # =========================================================================
    # Literal and Identifier Scanning
    # =========================================================================

    def number(self) -> Token:
        """
        Scan an integer or real literal.

        A digit run followed by '.' becomes a REAL_LITERAL (the fractional
        digits may be empty, so "12." is 12.0). Otherwise the digit run is
        an INTEGER_LITERAL.
        """
        chars = []

        while self.current_char is not None and self.current_char in self.DIGITS:
            chars.append(self.current_char)
            self.advance()

        if self.current_char == ".":
            chars.append(self.current_char)
            self.advance()

            while self.current_char is not None and self.current_char in self.DIGITS:
                chars.append(self.current_char)
                self.advance()

            return Token(TokenType.REAL_LITERAL, float("".join(chars)))

        return Token(TokenType.INTEGER_LITERAL, int("".join(chars)))

    def identifier(self) -> Token:
        """
        Scan an identifier or reserved word.

        Reserved words are matched case-insensitively and returned as the
        shared token from RESERVED_WORDS. Anything else is an IDENTIFIER
        carrying the name exactly as written.

        Example:
            Lexer("BEGIN x END").identifier()  # Token(BEGIN, BEGIN)
        """
        chars = []

        while self.current_char is not None and self.current_char in self.ALPHANUMERIC:
            chars.append(self.current_char)
            self.advance()

        name = "".join(chars)

        reserved = RESERVED_WORDS.get(name.upper())
        if reserved is not None:
            return reserved

        return Token(TokenType.IDENTIFIER, name)

    # =========================================================================
    # Token Production
    # =========================================================================

    def get_next_token(self) -> Token:
        """
        Return the next token in the source program.

        Call repeatedly; once input is exhausted every call returns
        Token(EOF, None).

        Raises:
            UnexpectedCharacterError: If the current character cannot
                start a token. The character is not consumed.
            UnterminatedCommentError: See skip_comment().
        """
        while self.current_char is not None:
            char = self.current_char

            if char.isspace():
                self.skip_whitespace()
                continue

            if char == "{":
                start = self.location
                self.advance()
                self.skip_comment(start)
                continue

            if char in self.DIGITS:
                return self.number()

            if char in self.LETTERS:
                return self.identifier()

            if char == ":" and self.peek() == "=":
                self.advance()
                self.advance()
                return Token(TokenType.ASSIGN, ":=")

            if char == ":":
                self.advance()
                return Token(TokenType.COLON, ":")

            token_type = self.SINGLE_TOKENS.get(char)
            if token_type is not None:
                self.advance()
                return Token(token_type, char)

            raise UnexpectedCharacterError(char, self.location, self._get_current_line())

        return Token(TokenType.EOF, None)

    def try_next_token(self) -> ScanResult:
        """
        Like get_next_token(), but return lexical errors as a ScanResult.

        Returns:
            ScanResult holding either the token or the LexicalError
        """
        try:
            return ScanResult(token=self.get_next_token())
        except LexicalError as e:
            return ScanResult(error=e)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate the remaining tokens, ending with a single EOF token.

        Raises:
            LexicalError: If invalid input is encountered
        """
        while True:
            token = self.get_next_token()
            yield token
            if token.is_type(TokenType.EOF):
                logger.debug(f"Reached end of {self.filename} at {self.location}")
                return

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _get_current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.input.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = self.length
        return self.input[self._line_start_pos:line_end]

    def _get_line_at(self, location: SourceLocation) -> str:
        """Get the source text of the line a location points into."""
        lines = self.input.split("\n")
        if 0 < location.line <= len(lines):
            return lines[location.line - 1]
        return ""


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize(source: str, options: Optional[LexerOptions] = None) -> list[Token]:
    """
    Tokenize a complete source string.

    Args:
        source: Source code of a program
        options: Lexer configuration

    Returns:
        All tokens, the last one being EOF

    Raises:
        LexicalError: If invalid input is encountered
    """
    return list(Lexer(source, options).tokenize())
