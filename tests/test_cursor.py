# =============================================================================
# test_cursor.py - Source Cursor Unit Tests
# =============================================================================
# Tests for position tracking over the source buffer: peek/advance,
# the end-of-input sentinel, line and line-start bookkeeping.
# =============================================================================

from clex.cursor import EOF_CHAR, SourceCursor


class TestPeekAndAdvance:
    """Character access."""

    def test_initial_state(self):
        """A new cursor sits at the buffer start on line 1."""
        cursor = SourceCursor("abc")
        assert cursor.offset == 0
        assert cursor.line == 1
        assert cursor.line_start == 0
        assert cursor.column == 0

    def test_peek_does_not_move(self):
        """peek() looks ahead without consuming."""
        cursor = SourceCursor("ab")
        assert cursor.peek() == "a"
        assert cursor.peek(1) == "b"
        assert cursor.offset == 0

    def test_peek_past_end(self):
        """peek() past the end returns the sentinel."""
        cursor = SourceCursor("a")
        assert cursor.peek(1) == EOF_CHAR
        assert cursor.peek(5) == EOF_CHAR

    def test_advance_returns_character(self):
        """advance() returns the consumed character."""
        cursor = SourceCursor("ab")
        assert cursor.advance() == "a"
        assert cursor.advance() == "b"
        assert cursor.at_end()

    def test_advance_at_end(self):
        """advance() at the end returns the sentinel and stays put."""
        cursor = SourceCursor("")
        assert cursor.at_end()
        assert cursor.advance() == EOF_CHAR
        assert cursor.offset == 0


class TestLineTracking:
    """Line number and line start bookkeeping."""

    def test_newline_moves_to_next_line(self):
        """Consuming a newline increments the line and resets the column."""
        cursor = SourceCursor("ab\ncd")
        for _ in range(3):
            cursor.advance()
        assert cursor.line == 2
        assert cursor.line_start == 3
        assert cursor.column == 0
        cursor.advance()
        assert cursor.mark() == (2, 1)

    def test_line_start_never_exceeds_offset(self):
        """line_start <= offset holds at every step."""
        cursor = SourceCursor("x\n\ny z\n\tw\n")
        while not cursor.at_end():
            assert cursor.line_start <= cursor.offset
            cursor.advance()
        assert cursor.line_start <= cursor.offset
        assert cursor.line == 5

    def test_carriage_return_is_not_a_newline(self):
        """Only \\n starts a new line."""
        cursor = SourceCursor("a\rb")
        for _ in range(3):
            cursor.advance()
        assert cursor.line == 1
        assert cursor.column == 3


class TestLineText:
    """Source excerpts for diagnostics."""

    def test_current_line_text(self):
        """The current line is returned without its newline."""
        cursor = SourceCursor("first\nsecond line\nthird")
        for _ in range(8):
            cursor.advance()
        assert cursor.current_line_text() == "second line"

    def test_last_line_without_newline(self):
        """The last line runs to the end of the buffer."""
        cursor = SourceCursor("a\nlast")
        cursor.advance()
        cursor.advance()
        assert cursor.current_line_text() == "last"

    def test_line_text_at(self):
        """Any line can be fetched by its start offset."""
        cursor = SourceCursor("one\ntwo\nthree")
        assert cursor.line_text_at(0) == "one"
        assert cursor.line_text_at(4) == "two"
        assert cursor.line_text_at(8) == "three"
