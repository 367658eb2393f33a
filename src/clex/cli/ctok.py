"""
ctok - Tokenizer Command-Line Interface
=======================================

This module implements the command-line interface for the tokenizer.
It reads one source file, scans it and prints the tokens grouped by
source line.

Usage Examples
--------------
Basic tokenization:
    $ ctok hello.c

Print token type names instead of spellings:
    $ ctok --names hello.c

Drop comments from the output:
    $ ctok --no-comments hello.c

Verbose mode (debug logging on stderr):
    $ ctok -v hello.c
"""

import logging
from pathlib import Path
from typing import Optional

import click

from clex import __version__
from clex.config import ScannerOptions
from clex.errors import SourceReadError
from clex.printer import print_tokens
from clex.scanner import Scanner
from clex.cli.errors import handle_cli_exception

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def read_source(path: Path, encoding: str) -> str:
    """
    Read a whole source file into memory.

    Raises:
        SourceReadError: If the file cannot be opened or decoded, or the
            encoding is unknown
    """
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise SourceReadError(str(path), f"not valid {encoding} text ({e.reason})") from e
    except LookupError as e:
        raise SourceReadError(str(path), f"unknown encoding {encoding}") from e
    except OSError as e:
        raise SourceReadError(str(path), e.strerror or str(e)) from e


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--names",
    is_flag=True,
    help="Print token type names (LTEQ, INT) instead of their spelling",
)
@click.option(
    "--comments/--no-comments",
    default=None,
    help="Keep or drop comment tokens (default: keep, or CLEX_KEEP_COMMENTS)",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="Source file encoding (default: utf-8, or CLEX_ENCODING)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="ctok")
def main(
    input_file: Path,
    names: bool,
    comments: Optional[bool],
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Tokenize a C source file.

    INPUT_FILE is the source file to scan.

    Tokens are printed grouped by the line they start on, each output line
    beginning with "<line>: ". Scanning stops at the first malformed
    literal, which is reported on stderr with its position.

    \b
    Examples:
        ctok hello.c                 # Print tokens
        ctok --names hello.c         # Print token type names
        ctok --no-comments hello.c   # Leave comments out
    """
    setup_logging(verbose)

    options = ScannerOptions.from_env()
    if comments is not None:
        options.keep_comments = comments
    if encoding is not None:
        options.encoding = encoding

    try:
        logger.debug(f"Reading {input_file} as {options.encoding}")
        source = read_source(input_file, options.encoding)

        tokens = Scanner(source, str(input_file), options).scan()

        print_tokens(tokens, names=names)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
