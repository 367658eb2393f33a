"""
clex Error Hierarchy
====================

This module defines the exception hierarchy for the tokenizer.
All exceptions inherit from ClexError, allowing callers to catch every
tokenizer-related failure with a single except clause if desired.

Exception Hierarchy
-------------------
ClexError (base)
├── LexicalError - malformed source text (always fatal)
│   ├── UnterminatedStringError - raw newline or end of input inside "..."
│   ├── EmptyCharLiteralError - ''
│   ├── InvalidCharLiteralError - character literal not closed after one char
│   └── UnterminatedCommentError - /* without a matching */
├── SourceReadError - source file missing, unreadable or undecodable
└── ResourceError - allocation failure while growing buffers

Error Message Format
--------------------
Lexical errors carry the position of the offending character and the text
of the line it sits on:

    E: unterminated string literal at hello.c:3:12
    char *s = "hello
                ^

Columns are 0-based offsets from the start of the line, the same values
carried by tokens.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class ClexError(Exception):
    """
    Base exception for all tokenizer errors.

        try:
            tokens = tokenize(source, "main.c")
        except ClexError as e:
            print(e)
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
        column: Offset from the start of the line (0-indexed)
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

class LexicalError(ClexError):
    """
    Malformed source text found while scanning.

    Lexical errors are unrecoverable: the scanner stops at the first one and
    no partial token stream is returned.

    Attributes:
        reason: Short description of the problem
        location: Where in the source the error occurred
        source_line: The full text of the offending source line
    """

    def __init__(
        self,
        reason: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.reason = reason
        self.location = location
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the diagnostic with location, source excerpt and caret.

        Example output:
            E: invalid char literal at main.c:4:11
            char c = 'ab';
                       ^
        """
        if self.location is None:
            return f"E: {self.reason}"

        parts = [f"E: {self.reason} at {self.location}"]

        if self.source_line is not None:
            parts.append(self.source_line)
            parts.append(f"{caret_padding(self.source_line, self.location.column)}^")

        return "\n".join(parts)


def caret_padding(source_line: str, column: int) -> str:
    """
    Build the whitespace that puts a caret under `column` of `source_line`.

    Tabs in the source line are reproduced so the caret stays aligned no
    matter how the terminal expands them.
    """
    prefix = source_line[:column]
    padding = "".join("\t" if ch == "\t" else " " for ch in prefix)
    return padding + " " * (column - len(prefix))


class UnterminatedStringError(LexicalError):
    """
    Unterminated string literal.

    Raised when a raw newline (or the end of input) is reached before the
    closing double quote.

    Example:
        char *s = "hello
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__("unterminated string literal", location, source_line)


class EmptyCharLiteralError(LexicalError):
    """Character literal with nothing between the quotes: ''."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__("empty char literal", location, source_line)


class InvalidCharLiteralError(LexicalError):
    """
    Character literal that does not close after one character.

    The location points at the character found where the closing quote
    was expected.

    Examples:
        'ab'
        '\\n
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__("invalid char literal", location, source_line)


class UnterminatedCommentError(LexicalError):
    """Block comment that reaches the end of input without a closing */."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__("unterminated block comment", location, source_line)


# =============================================================================
# Input and Resource Errors
# =============================================================================

class SourceReadError(ClexError):
    """
    Source file could not be read.

    Raised when:
    - File not found
    - Permission denied
    - Contents cannot be decoded with the configured encoding
    """

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"cannot read '{filename}': {reason}")


class ResourceError(ClexError):
    """Memory exhausted while growing the token stream or a lexeme buffer."""
    pass
