"""
Source Cursor
=============

Position state over an immutable source buffer: the current offset, the
current line number and the offset where the current line starts.

Columns are derived as ``offset - line_start``, so they are 0-based and
always measured from the current line's own start.
"""

# Returned by peek() and advance() past the end of the buffer
EOF_CHAR = "\0"


class SourceCursor:
    """
    Walks a source buffer one character at a time.

    Usage:
        cursor = SourceCursor("int x;\\nfoo;")
        while not cursor.at_end():
            cursor.advance()

    Attributes:
        source: The text being scanned (never modified)
        offset: Index of the current character
        line: Current line number (1-indexed)
        line_start: Offset of the first character of the current line
    """

    def __init__(self, source: str):
        self.source = source
        self.offset = 0
        self.line = 1
        self.line_start = 0

    def at_end(self) -> bool:
        """Check if the cursor has consumed the whole buffer."""
        return self.offset >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        """
        Look at the character `offset` past the current position.

        Returns EOF_CHAR if that position is past the end of the buffer.
        """
        pos = self.offset + offset
        if pos >= len(self.source):
            return EOF_CHAR
        return self.source[pos]

    def advance(self) -> str:
        """
        Consume and return the current character.

        Consuming a newline moves the cursor to the next line. At the end of
        the buffer nothing moves and EOF_CHAR is returned.
        """
        if self.at_end():
            return EOF_CHAR

        char = self.source[self.offset]
        self.offset += 1

        if char == "\n":
            self.line += 1
            self.line_start = self.offset

        return char

    @property
    def column(self) -> int:
        return self.offset - self.line_start

    def mark(self) -> tuple[int, int]:
        """Return the current (line, column) pair."""
        return self.line, self.column

    def line_text_at(self, line_start: int) -> str:
        """Return the text of the line starting at `line_start`, without its newline."""
        line_end = self.source.find("\n", line_start)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_start:line_end]

    def current_line_text(self) -> str:
        """Get the current line of source text for error reporting."""
        return self.line_text_at(self.line_start)
