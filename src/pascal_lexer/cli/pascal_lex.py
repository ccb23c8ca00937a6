"""
pascal-lex - Token Dump Command-Line Interface
==============================================

Prints the token stream the lexer produces for a Pascal source file,
one token per line:

    type=PROGRAM    value=PROGRAM
    type=IDENTIFIER value=example1
    type=SEMICOLON  value=;

Usage Examples
--------------
Scan a file:
    $ pascal-lex example.pas

Scan standard input:
    $ echo "a := 1;" | pascal-lex -

Scan the built-in example program:
    $ pascal-lex

Reject unterminated comments:
    $ pascal-lex --strict-comments example.pas
"""

import logging
from pathlib import Path
from typing import Optional

import click

from pascal_lexer import __version__
from pascal_lexer.cli.errors import handle_cli_exception
from pascal_lexer.lexer import Lexer, LexerOptions
from pascal_lexer.tokens import TokenType


EXAMPLE_PROGRAM = """\
program example1;

var a,b c: integer;
begin
a:= 1;
b:= 2;
c:= a+b;
end."""


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def read_source(input_file: Optional[Path]) -> tuple[str, str]:
    """
    Load the program text to scan.

    Returns:
        (source, filename) - the built-in example when no file is given,
        standard input for '-'
    """
    if input_file is None:
        return EXAMPLE_PROGRAM, "<example>"
    if str(input_file) == "-":
        return click.get_text_stream("stdin").read(), "<stdin>"
    return input_file.read_text(), str(input_file)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--strict-comments",
    is_flag=True,
    help="Fail on a '{' comment that is never closed",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="pascal-lex")
def main(
    input_file: Optional[Path],
    strict_comments: bool,
    verbose: bool,
) -> None:
    """
    Print the tokens of a Pascal program.

    INPUT_FILE is the source file to scan ('-' for stdin). Without it,
    a small built-in example program is scanned.

    \b
    Examples:
        pascal-lex example.pas       # Scan a file
        pascal-lex -                 # Scan stdin
        pascal-lex                   # Scan the built-in example
    """
    setup_logging(verbose)

    try:
        source, filename = read_source(input_file)
        options = LexerOptions(filename=filename, strict_comments=strict_comments)
        lexer = Lexer(source, options)

        token = lexer.get_next_token()
        while not token.is_type(TokenType.EOF):
            click.echo(f"type={token.type.value}\tvalue={token.value}")
            token = lexer.get_next_token()

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
