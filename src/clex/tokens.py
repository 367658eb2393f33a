"""
Token Model
===========

Token categories, token types and the immutable Token record produced by
the scanner.

Token Categories
----------------
- Punctuators: single characters such as ( ) { } ; , < > = + -
- Operators: two-character forms such as <= == -> ++ += &&
- Keywords: the 31 reserved words (int, while, return, ...)
- Identifiers: variable, type and function names
- Numbers: decimal, floating point, hexadecimal (0x), binary (0b), octal (0)
- Strings: "double quoted", quotes included in the text
- Characters: 'c', quotes included in the text
- Comments: // line and /* block */, markers included in the text
- Unknown: any single character matching no other rule

Fixed tokens (punctuators, operators, keywords) carry no text; their
spelling is implied by the type and available as ``TokenType.lexeme``.

The query helpers on Token (``category``, ``is_keyword()``,
``is_assignment_operator()``) are public API for code that consumes the
token stream, such as a parser; the scanner itself does not use them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Token Categories
# =============================================================================

class TokenCategory(Enum):
    """Broad classification of a lexeme."""

    PUNCTUATOR = "punctuator"
    OPERATOR = "operator"
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING = "string"
    CHARACTER = "character"
    COMMENT = "comment"
    UNKNOWN = "unknown"


_P = TokenCategory.PUNCTUATOR
_O = TokenCategory.OPERATOR
_K = TokenCategory.KEYWORD


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Specific token types.

    Each member's value is a ``(lexeme, category)`` pair. ``lexeme`` is the
    canonical spelling for fixed tokens and None for tokens whose text comes
    from the source (identifiers, literals, comments, unknown characters).
    """

    # === Punctuators ===
    TILDE = ("~", _P)
    BANG = ("!", _P)
    HASH = ("#", _P)
    MOD = ("%", _P)
    XOR = ("^", _P)
    AMP = ("&", _P)
    STAR = ("*", _P)
    LPAREN = ("(", _P)
    RPAREN = (")", _P)
    MINUS = ("-", _P)
    PLUS = ("+", _P)
    EQ = ("=", _P)
    LBRACK = ("[", _P)
    RBRACK = ("]", _P)
    LBRACE = ("{", _P)
    RBRACE = ("}", _P)
    LANGLE = ("<", _P)
    RANGLE = (">", _P)
    DOT = (".", _P)
    COMMA = (",", _P)
    COLON = (":", _P)
    SEMICOLON = (";", _P)
    SQUOTE = ("'", _P)      # never scanned: ' always opens a char literal
    DQUOTE = ('"', _P)      # never scanned: " always opens a string literal
    VBAR = ("|", _P)
    FSLASH = ("/", _P)
    BSLASH = ("\\", _P)
    QMARK = ("?", _P)

    # === Comparison and Logical Operators ===
    LTEQ = ("<=", _O)
    GTEQ = (">=", _O)
    EQEQ = ("==", _O)
    NEQ = ("!=", _O)
    AND = ("&&", _O)
    OR = ("||", _O)

    # === Member Access, Increment/Decrement ===
    PTRACCESS = ("->", _O)
    PLUSPLUS = ("++", _O)
    MINUSMINUS = ("--", _O)

    # === Compound Assignment ===
    PLUSASSIGN = ("+=", _O)
    MINUSASSIGN = ("-=", _O)
    STARASSIGN = ("*=", _O)
    DIVASSIGN = ("/=", _O)
    MODASSIGN = ("%=", _O)
    AMPASSIGN = ("&=", _O)
    ORASSIGN = ("|=", _O)
    XORASSIGN = ("^=", _O)
    TILDEASSIGN = ("~=", _O)

    # === Keywords ===
    BREAK = ("break", _K)
    CASE = ("case", _K)
    CHAR = ("char", _K)
    CONST = ("const", _K)
    CONTINUE = ("continue", _K)
    DEFAULT = ("default", _K)
    DO = ("do", _K)
    DOUBLE = ("double", _K)
    ELSE = ("else", _K)
    ENUM = ("enum", _K)
    EXTERN = ("extern", _K)
    FLOAT = ("float", _K)
    FOR = ("for", _K)
    GOTO = ("goto", _K)
    IF = ("if", _K)
    INLINE = ("inline", _K)
    INT = ("int", _K)
    LONG = ("long", _K)
    REGISTER = ("register", _K)
    RETURN = ("return", _K)
    SHORT = ("short", _K)
    SIGNED = ("signed", _K)
    STATIC = ("static", _K)
    STRUCT = ("struct", _K)
    SWITCH = ("switch", _K)
    TYPEDEF = ("typedef", _K)
    UNION = ("union", _K)
    UNSIGNED = ("unsigned", _K)
    VOID = ("void", _K)
    VOLATILE = ("volatile", _K)
    WHILE = ("while", _K)

    # === Tokens Carrying Source Text ===
    IDENTIFIER = (None, TokenCategory.IDENTIFIER)
    NUMBER = (None, TokenCategory.NUMBER)
    STRING = (None, TokenCategory.STRING)
    CHARACTER = (None, TokenCategory.CHARACTER)
    COMMENT = (None, TokenCategory.COMMENT)
    UNKNOWN = (None, TokenCategory.UNKNOWN)

    def __init__(self, lexeme: Optional[str], category: TokenCategory):
        self.lexeme = lexeme
        self.category = category

    @property
    def has_text(self) -> bool:
        """Return True if tokens of this type carry their own source text."""
        return self.lexeme is None


# =============================================================================
# Lookup Tables
# =============================================================================

# Exact full-lexeme match from reserved word to keyword type
KEYWORDS: dict[str, TokenType] = {
    t.lexeme: t for t in TokenType if t.category is TokenCategory.KEYWORD
}

# Two-character operators, tried before the single-character fallback
OPERATORS: dict[str, TokenType] = {
    t.lexeme: t for t in TokenType if t.category is TokenCategory.OPERATOR
}

# Single-character punctuators
PUNCTUATORS: dict[str, TokenType] = {
    t.lexeme: t for t in TokenType if t.category is TokenCategory.PUNCTUATOR
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token scanned from source text.

    Attributes:
        type: The TokenType classification
        text: Exact source slice for identifiers, literals, comments and
              unknown characters; None for fixed tokens
        line: Line of the token's first character (1-indexed)
        column: Offset of the first character from its line start (0-indexed)
    """
    type: TokenType
    text: Optional[str]
    line: int
    column: int

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.text is not None:
            return f"Token({self.type.name}, {self.text!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    @property
    def category(self) -> TokenCategory:
        return self.type.category

    @property
    def lexeme(self) -> str:
        """Return the source spelling of this token."""
        if self.text is not None:
            return self.text
        return self.type.lexeme

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type.category is TokenCategory.KEYWORD

    def is_assignment_operator(self) -> bool:
        """Return True if this token is a plain or compound assignment."""
        return self.type in (
            TokenType.EQ,
            TokenType.PLUSASSIGN,
            TokenType.MINUSASSIGN,
            TokenType.STARASSIGN,
            TokenType.DIVASSIGN,
            TokenType.MODASSIGN,
            TokenType.AMPASSIGN,
            TokenType.ORASSIGN,
            TokenType.XORASSIGN,
            TokenType.TILDEASSIGN,
        )
