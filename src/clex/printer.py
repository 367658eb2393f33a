"""
Token Stream Printer
====================

Formats a token stream as text, one output line per source line:

    1: int main ( void )
    2: {
    3: return 0 ; // done
    4: }

Identifiers, numbers, strings, characters and comments are printed exactly
as written. Unknown characters print as UNKNOWN(<char>). Every other token
prints its canonical spelling, or its type name when ``names`` is set:

    1: INT IDENTIFIER LPAREN VOID RPAREN
"""

from itertools import groupby
from typing import Iterable, Optional, TextIO

import click

from clex.tokens import Token, TokenType


def render_token(token: Token, names: bool = False) -> str:
    """
    Render a single token for display.

    Args:
        token: The token to render
        names: Render fixed tokens by type name (LTEQ) instead of spelling (<=)
    """
    if token.type is TokenType.UNKNOWN:
        return f"UNKNOWN({token.text})"
    if token.text is not None:
        return token.text
    if names:
        return token.type.name
    return token.type.lexeme


def format_tokens(tokens: Iterable[Token], names: bool = False) -> list[str]:
    """
    Group tokens by source line and format each group.

    Returns:
        One "<line>: tok tok ..." string per source line that has tokens
    """
    lines = []
    for line, group in groupby(tokens, key=lambda t: t.line):
        rendered = " ".join(render_token(t, names) for t in group)
        lines.append(f"{line}: {rendered}")
    return lines


def print_tokens(
    tokens: Iterable[Token],
    out: Optional[TextIO] = None,
    names: bool = False,
) -> None:
    """Write the formatted token lines to `out` (stdout by default)."""
    for line in format_tokens(tokens, names):
        click.echo(line, file=out)
