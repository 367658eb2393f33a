# =============================================================================
# test_errors.py - Error Hierarchy and Diagnostic Format Tests
# =============================================================================

import pytest
from clex.errors import (
    ClexError,
    EmptyCharLiteralError,
    InvalidCharLiteralError,
    LexicalError,
    ResourceError,
    SourceLocation,
    SourceReadError,
    UnterminatedCommentError,
    UnterminatedStringError,
    caret_padding,
)
from clex.scanner import tokenize


class TestHierarchy:
    """Every error can be caught as ClexError."""

    @pytest.mark.parametrize(
        "error_class",
        [
            UnterminatedStringError,
            EmptyCharLiteralError,
            InvalidCharLiteralError,
            UnterminatedCommentError,
        ],
    )
    def test_lexical_errors(self, error_class):
        """Lexical errors derive from LexicalError and ClexError."""
        error = error_class(SourceLocation("t.c", 1, 0), "x")
        assert isinstance(error, LexicalError)
        assert isinstance(error, ClexError)

    def test_other_errors(self):
        """Read and resource errors are ClexErrors but not lexical."""
        assert issubclass(SourceReadError, ClexError)
        assert issubclass(ResourceError, ClexError)
        assert not issubclass(SourceReadError, LexicalError)


class TestDiagnosticFormat:
    """E: <reason> at <file>:<line>:<column>, excerpt, caret."""

    def test_source_location_str(self):
        """Locations print as file:line:column."""
        assert str(SourceLocation("main.c", 3, 7)) == "main.c:3:7"

    def test_full_diagnostic(self):
        """The caret sits under the offending column."""
        error = UnterminatedStringError(SourceLocation("t.c", 3, 4), 'x = "abc')
        assert str(error) == (
            'E: unterminated string literal at t.c:3:4\n'
            'x = "abc\n'
            '    ^'
        )

    def test_caret_at_column_zero(self):
        """Column 0 puts the caret at the start of the line."""
        error = EmptyCharLiteralError(SourceLocation("t.c", 1, 0), "''")
        assert str(error).splitlines()[-1] == "^"

    def test_without_location(self):
        """Errors without a location print only the reason."""
        assert str(LexicalError("bad input")) == "E: bad input"

    def test_without_source_line(self):
        """Errors without an excerpt print only the header line."""
        error = UnterminatedCommentError(SourceLocation("t.c", 2, 1))
        assert str(error) == "E: unterminated block comment at t.c:2:1"

    def test_caret_padding_keeps_tabs(self):
        """Tabs before the column are reproduced in the padding."""
        assert caret_padding("\tx = 'ab';", 3) == "\t  "

    def test_caret_padding_past_line_end(self):
        """A column at the end of the line pads with spaces."""
        assert caret_padding("ab", 2) == "  "
        assert caret_padding("ab", 4) == "    "

    def test_scanner_diagnostic(self):
        """A scanner error reports the file, position and line text."""
        source = "int a;\nchar c = 'ab';\n"
        with pytest.raises(InvalidCharLiteralError) as excinfo:
            tokenize(source, "chars.c")
        assert str(excinfo.value) == (
            "E: invalid char literal at chars.c:2:11\n"
            "char c = 'ab';\n"
            "           ^"
        )

    def test_source_read_error_message(self):
        """Read errors name the file and the reason."""
        error = SourceReadError("missing.c", "No such file or directory")
        assert str(error) == "cannot read 'missing.c': No such file or directory"
