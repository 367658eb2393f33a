"""
clex - Lexical Analyzer for C-like Source Text
==============================================

This package converts raw C-like source text into an ordered sequence of
typed tokens, each carrying the line and column of its first character,
ready to be consumed by a parser or by tools that need to see comments
verbatim.

Main Components
---------------
- **cursor**: position tracking over the source buffer (offset, line, line start)
- **scanner**: the single-pass tokenizer with maximal-munch operator matching
- **tokens**: token categories, token types and the Token record
- **printer**: renders a token stream grouped by source line
- **config**: scanner options, with environment variable overrides

Quick Start
-----------
    >>> from clex import tokenize
    >>> [t.type.name for t in tokenize("a->b <= 3;")]
    ['IDENTIFIER', 'PTRACCESS', 'IDENTIFIER', 'LTEQ', 'NUMBER', 'SEMICOLON']

Or use the command-line tool:
    $ ctok hello.c
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from clex.config import ScannerOptions
from clex.cursor import EOF_CHAR, SourceCursor
from clex.errors import (
    ClexError,
    SourceLocation,
    LexicalError,
    UnterminatedStringError,
    EmptyCharLiteralError,
    InvalidCharLiteralError,
    UnterminatedCommentError,
    SourceReadError,
    ResourceError,
)
from clex.tokens import (
    KEYWORDS,
    Token,
    TokenCategory,
    TokenType,
)
from clex.scanner import Scanner, TokenStream, tokenize
from clex.printer import format_tokens, print_tokens, render_token

__all__ = [
    # Version
    "__version__",
    # Configuration
    "ScannerOptions",
    # Cursor
    "EOF_CHAR",
    "SourceCursor",
    # Errors
    "ClexError",
    "SourceLocation",
    "LexicalError",
    "UnterminatedStringError",
    "EmptyCharLiteralError",
    "InvalidCharLiteralError",
    "UnterminatedCommentError",
    "SourceReadError",
    "ResourceError",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenCategory",
    "TokenType",
    # Scanning
    "Scanner",
    "TokenStream",
    "tokenize",
    # Printing
    "format_tokens",
    "print_tokens",
    "render_token",
]
