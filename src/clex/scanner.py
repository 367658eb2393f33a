"""
Scanner (Tokenizer)
===================

This module converts C-like source text into an ordered stream of tokens,
each tagged with the line and column of its first character.

Dispatch
--------
At each position the scanner looks at the current character and one
character of lookahead, always preferring the longest token (maximal munch):

- "//" and "/*" start comments, checked before "/=" and "/"
- Two-character operators (<= >= == != && || -> ++ -- and the compound
  assignments += -= *= /= %= &= |= ^= ~=) win over their one-character prefix
- Letters and underscores start identifiers; the whole lexeme is then looked
  up in the keyword table
- Digits start numbers, '"' starts a string, "'" starts a character literal
- Space, tab, carriage return, vertical tab and form feed are discarded;
  newlines are discarded after updating line bookkeeping
- Anything else becomes a one-character UNKNOWN token

Number Formats
--------------
| Format      | Prefix  | Example   |
|-------------|---------|-----------|
| Decimal     | (none)  | 123, 10UL |
| Float       | (none)  | 3.14f     |
| Hexadecimal | 0x/0X   | 0x7F      |
| Binary      | 0b/0B   | 0b1010    |
| Octal       | 0       | 0177      |

The token text is the literal exactly as written, prefix and suffix
included. Integer suffixes (u, U, l, L) are kept but not validated.

Example Usage
-------------
>>> from clex.scanner import tokenize
>>> for token in tokenize("int x = 0x1A;", "test.c"):
...     print(token)
Token(INT, 1:0)
Token(IDENTIFIER, 'x', 1:4)
Token(EQ, 1:6)
Token(NUMBER, '0x1A', 1:8)
Token(SEMICOLON, 1:12)
"""

from typing import Iterator, Optional
import logging
import string

from clex.config import ScannerOptions
from clex.cursor import SourceCursor
from clex.errors import (
    EmptyCharLiteralError,
    InvalidCharLiteralError,
    ResourceError,
    SourceLocation,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from clex.tokens import KEYWORDS, OPERATORS, PUNCTUATORS, Token, TokenType

logger = logging.getLogger(__name__)


# =============================================================================
# Token Stream
# =============================================================================

class TokenStream:
    """
    Append-only ordered sequence of tokens.

    The scanner is the only writer. Once a token is appended it is never
    replaced or removed.

    Readers get iteration, indexing and ``types()``; these are the API a
    parser or other consumer of the stream works against.
    """

    def __init__(self) -> None:
        self._tokens: list[Token] = []

    def append(self, token: Token) -> None:
        self._tokens.append(token)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __getitem__(self, index):
        return self._tokens[index]

    def __repr__(self) -> str:
        return f"TokenStream({len(self._tokens)} tokens)"

    def types(self) -> list[TokenType]:
        """Return the type of every token, in order."""
        return [t.type for t in self._tokens]


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes C-like source code in a single left-to-right pass.

    Each Scanner owns its cursor, its scratch buffer and the stream it
    produces, so one instance handles exactly one input.

    Usage:
        scanner = Scanner(source_text, filename)
        tokens = scanner.scan()

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
        options: Scanner configuration
    """

    # Characters that can start an identifier
    IDENT_START = frozenset(string.ascii_letters + "_")

    # Characters that can continue an identifier
    IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")

    DIGITS = frozenset(string.digits)
    HEX_DIGITS = frozenset(string.hexdigits)
    BINARY_DIGITS = frozenset("01")

    # Discarded without producing a token ("\n" is handled separately)
    WHITESPACE = frozenset(" \t\r\v\f")

    INTEGER_SUFFIX_CHARS = frozenset("uUlL")
    MAX_INTEGER_SUFFIX = 3

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        options: Optional[ScannerOptions] = None,
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: The source code to tokenize
            filename: Name of the source file (for error messages)
            options: Scanner configuration (uses defaults if None)
        """
        self.source = source
        self.filename = filename
        self.options = options or ScannerOptions()

        self._cursor = SourceCursor(source)
        self._tokens = TokenStream()

        # Text of the lexeme being scanned; cleared before each new lexeme
        self._scratch: list[str] = []

        self._start_line = 1
        self._start_column = 0
        self._start_line_offset = 0

    def scan(self) -> TokenStream:
        """
        Scan the whole source and return the token stream.

        Returns:
            TokenStream with every token in source order

        Raises:
            LexicalError: On the first malformed literal or comment
            ResourceError: If memory runs out while scanning
        """
        logger.debug(f"Scanning {self.filename} ({len(self.source)} characters)")

        try:
            while not self._cursor.at_end():
                self._scan_token()
        except MemoryError as e:
            raise ResourceError(f"out of memory while scanning {self.filename}") from e

        logger.debug(f"Scanned {len(self._tokens)} tokens from {self.filename}")
        return self._tokens

    # =========================================================================
    # Lexeme Bookkeeping
    # =========================================================================

    def _begin_lexeme(self) -> None:
        """Record where the next lexeme starts and reset the scratch buffer."""
        self._start_line, self._start_column = self._cursor.mark()
        self._start_line_offset = self._cursor.line_start
        self._scratch.clear()

    def _take(self) -> str:
        """Consume the current character into the scratch buffer."""
        char = self._cursor.advance()
        self._scratch.append(char)
        return char

    def _take_while(self, allowed: frozenset) -> int:
        """Consume characters while they belong to `allowed`; return the count."""
        count = 0
        while not self._cursor.at_end() and self._cursor.peek() in allowed:
            self._take()
            count += 1
        return count

    def _emit(self, token_type: TokenType) -> None:
        """Append a token for the current lexeme."""
        text = "".join(self._scratch) if token_type.has_text else None
        self._tokens.append(
            Token(
                type=token_type,
                text=text,
                line=self._start_line,
                column=self._start_column,
            )
        )

    def _lexeme_location(self) -> SourceLocation:
        return SourceLocation(self.filename, self._start_line, self._start_column)

    def _cursor_location(self) -> SourceLocation:
        return SourceLocation(self.filename, self._cursor.line, self._cursor.column)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> None:
        """Classify the lexeme at the cursor and emit zero or one token."""
        char = self._cursor.peek()

        if char in self.WHITESPACE or char == "\n":
            self._cursor.advance()
            return

        self._begin_lexeme()
        next_char = self._cursor.peek(1)

        if char == "/" and next_char == "/":
            self._scan_line_comment()
        elif char == "/" and next_char == "*":
            self._scan_block_comment()
        elif char in self.IDENT_START:
            self._scan_identifier()
        elif char in self.DIGITS:
            self._scan_number()
        elif char == '"':
            self._scan_string()
        elif char == "'":
            self._scan_char()
        else:
            self._scan_operator(char, next_char)

    def _scan_operator(self, char: str, next_char: str) -> None:
        """
        Scan an operator or punctuator.

        Two-character operators are tried first, so "<=" never splits
        into "<" and "=".
        """
        pair = char + next_char
        if pair in OPERATORS:
            self._take()
            self._take()
            self._emit(OPERATORS[pair])
            return

        self._take()
        if char in PUNCTUATORS:
            self._emit(PUNCTUATORS[char])
        else:
            self._emit(TokenType.UNKNOWN)

    def _scan_identifier(self) -> None:
        """
        Scan an identifier or keyword.

        The full lexeme is matched against the keyword table, so "intx" is
        an identifier and only "int" is the keyword.
        """
        self._take_while(self.IDENT_CHARS)
        name = "".join(self._scratch)

        if name in KEYWORDS:
            self._emit(KEYWORDS[name])
        else:
            self._emit(TokenType.IDENTIFIER)

    # =========================================================================
    # Numbers
    # =========================================================================

    def _scan_number(self) -> None:
        """
        Scan a numeric literal.

        Handles:
        - Hexadecimal: 0x7F or 0X7F
        - Binary: 0b1010 or 0B1010
        - Octal: 0177 (digits are not checked against 0-7)
        - Decimal: 123, optionally with a fraction (3.14) and an f/F suffix
        """
        if self._cursor.peek() == "0":
            radix_char = self._cursor.peek(1)

            if radix_char in "xX":
                self._take()  # 0
                self._take()  # x
                self._take_while(self.HEX_DIGITS)
                self._scan_integer_suffix()
                self._emit(TokenType.NUMBER)
                return

            if radix_char in "bB":
                self._take()  # 0
                self._take()  # b
                self._take_while(self.BINARY_DIGITS)
                self._scan_integer_suffix()
                self._emit(TokenType.NUMBER)
                return

        self._scan_decimal_number()

    def _scan_decimal_number(self) -> None:
        """Scan decimal (or octal) digits with an optional fraction and suffix."""
        self._take_while(self.DIGITS)

        is_float = False
        if self._cursor.peek() == "." and self._cursor.peek(1) in self.DIGITS:
            self._take()  # .
            self._take_while(self.DIGITS)
            is_float = True

        if is_float:
            if self._cursor.peek() in "fF":
                self._take()
        else:
            self._scan_integer_suffix()

        self._emit(TokenType.NUMBER)

    def _scan_integer_suffix(self) -> None:
        """Keep up to three u/U/l/L characters after an integer literal."""
        count = 0
        while (
            count < self.MAX_INTEGER_SUFFIX
            and self._cursor.peek() in self.INTEGER_SUFFIX_CHARS
        ):
            self._take()
            count += 1

    # =========================================================================
    # String and Character Literals
    # =========================================================================

    def _scan_string(self) -> None:
        """
        Scan a double-quoted string literal.

        A backslash admits the next character without checking that the
        escape is valid, so \\" does not end the string.

        Raises:
            UnterminatedStringError: If a raw newline or the end of input
                comes before the closing quote
        """
        self._take()  # opening "

        while True:
            char = self._cursor.peek()

            if self._cursor.at_end() or char == "\n":
                raise UnterminatedStringError(
                    self._lexeme_location(),
                    self._cursor.line_text_at(self._start_line_offset),
                )

            if char == '"':
                self._take()  # closing "
                self._emit(TokenType.STRING)
                return

            self._take()
            if char == "\\":
                if self._cursor.at_end():
                    continue  # reported as unterminated on the next pass
                self._take()

    def _scan_char(self) -> None:
        """
        Scan a single-quoted character literal.

        Accepts exactly one character or one backslash escape pair
        between the quotes.

        Raises:
            EmptyCharLiteralError: For ''
            InvalidCharLiteralError: If the literal does not close after
                its content, or the content is a newline or end of input
        """
        self._take()  # opening '

        char = self._cursor.peek()
        if char == "'":
            raise EmptyCharLiteralError(
                self._lexeme_location(),
                self._cursor.current_line_text(),
            )

        if self._cursor.at_end() or char == "\n":
            raise InvalidCharLiteralError(
                self._cursor_location(),
                self._cursor.current_line_text(),
            )

        self._take()
        if char == "\\":
            if self._cursor.at_end() or self._cursor.peek() == "\n":
                raise InvalidCharLiteralError(
                    self._cursor_location(),
                    self._cursor.current_line_text(),
                )
            self._take()

        if self._cursor.at_end() or self._cursor.peek() != "'":
            raise InvalidCharLiteralError(
                self._cursor_location(),
                self._cursor.current_line_text(),
            )

        self._take()  # closing '
        self._emit(TokenType.CHARACTER)

    # =========================================================================
    # Comments
    # =========================================================================

    def _scan_line_comment(self) -> None:
        """Scan a // comment up to, but not including, the newline."""
        self._take()
        self._take()

        while not self._cursor.at_end() and self._cursor.peek() != "\n":
            self._take()

        self._emit_comment()

    def _scan_block_comment(self) -> None:
        """
        Scan a /* ... */ comment including both delimiters.

        Raises:
            UnterminatedCommentError: If the input ends before */
        """
        self._take()
        self._take()

        while not self._cursor.at_end():
            if self._cursor.peek() == "*" and self._cursor.peek(1) == "/":
                self._take()
                self._take()
                self._emit_comment()
                return
            self._take()

        raise UnterminatedCommentError(
            self._lexeme_location(),
            self._cursor.line_text_at(self._start_line_offset),
        )

    def _emit_comment(self) -> None:
        if self.options.keep_comments:
            self._emit(TokenType.COMMENT)
        else:
            logger.debug(
                f"Dropped comment at {self.filename}:{self._start_line}:{self._start_column}"
            )


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize(
    source: str,
    filename: str = "<input>",
    options: Optional[ScannerOptions] = None,
) -> TokenStream:
    """
    Tokenize source text in one call.

    Args:
        source: The source code to tokenize
        filename: Source filename for error messages
        options: Scanner configuration (uses defaults if None)

    Returns:
        TokenStream with every token in source order

    Raises:
        LexicalError: On the first malformed literal or comment
    """
    return Scanner(source, filename, options).scan()
