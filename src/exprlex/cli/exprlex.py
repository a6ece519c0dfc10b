"""
exprlex - Token Stream Command-Line Interface
=============================================

This module implements the command-line interface for the expression
lexer. It reads a whole source file into memory, tokenizes it and prints
one token per line.

Usage Examples
--------------
Tokenize a file:
    $ exprlex program.txt

Prompt for the file name:
    $ exprlex
    Please enter a filename.
    program.txt

Report every lexical error instead of stopping at the first:
    $ exprlex -k program.txt

Drop characters the lexer does not recognize:
    $ exprlex --on-unrecognized skip program.txt

Exit Codes
----------
0 - Success
1 - Lexical error (malformed number, invalid character)
2 - Invalid arguments, missing or unreadable file
3 - Internal error
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from exprlex import __version__
from exprlex.cli.errors import ExitCode, handle_cli_exception
from exprlex.errors import LexerError
from exprlex.lexer import Lexer
from exprlex.options import LexerOptions, UnrecognizedPolicy

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def print_tokens(lexer: Lexer, keep_going: bool) -> int:
    """
    Print every token the lexer produces, one per line.

    Args:
        lexer: The lexer to drain
        keep_going: Report lexical errors and continue instead of raising

    Returns:
        Number of lexical errors reported
    """
    error_count = 0
    while True:
        try:
            token = lexer.next_token()
        except LexerError as e:
            if not keep_going:
                raise
            click.echo(str(e), err=True)
            error_count += 1
            continue

        if token is None:
            return error_count
        click.echo(repr(token))


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--on-unrecognized",
    type=click.Choice([p.value for p in UnrecognizedPolicy], case_sensitive=False),
    default=None,
    help="What to do with characters that cannot start a token: "
         "error (default), skip, or stop the token stream. "
         "Overrides EXPRLEX_ON_UNRECOGNIZED.",
)
@click.option(
    "-k", "--keep-going",
    is_flag=True,
    help="Report each lexical error and continue tokenizing",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="exprlex")
def main(
    input_file: Optional[Path],
    on_unrecognized: Optional[str],
    keep_going: bool,
    verbose: bool,
) -> None:
    """
    Print the token stream of an expression source file.

    INPUT_FILE is the source file to tokenize. If it is omitted, the
    file name is read from standard input.

    \b
    Examples:
        exprlex program.txt                      # Print tokens
        exprlex -k program.txt                   # Report all errors
        exprlex --on-unrecognized skip prog.txt  # Drop invalid characters
    """
    setup_logging(verbose)

    if input_file is None:
        answer = click.prompt("Please enter a filename.", prompt_suffix="\n")
        input_file = Path(answer.strip())

    try:
        source = input_file.read_text(encoding="utf-8")

        options = LexerOptions.from_env()
        if on_unrecognized is not None:
            options.on_unrecognized = UnrecognizedPolicy(on_unrecognized.lower())

        logger.debug(
            f"Tokenizing {input_file} ({len(source)} characters, "
            f"on_unrecognized={options.on_unrecognized.value})"
        )

        error_count = print_tokens(Lexer(source, options), keep_going)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if error_count:
        click.echo(f"{input_file}: {error_count} lexical error(s)", err=True)
        sys.exit(ExitCode.LEX_ERROR)


if __name__ == "__main__":
    main()
