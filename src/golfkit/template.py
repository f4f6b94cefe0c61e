"""Template literal composition"""

from __future__ import annotations

from typing import Sequence

from golfkit.printable import Expr, Printable, Text, render
from golfkit.quoting import BACKTICK, escape

TEMPLATE_QUOTE = BACKTICK


def template_expression(expression: Printable) -> Expr:
    """Wrap an expression in a template hole: ``a`` -> ``${a}``"""
    return Expr(f"${{{render(expression)}}}")


def compose_template(segments: Sequence[Printable]) -> Expr:
    """Build a template literal from alternating text and expression segments.

    Even positions are literal text, given as plain strings or ``Text``.
    Odd positions are expressions placed in holes. A missing or empty hole
    is skipped, so an odd-length list simply ends on a literal.

    Example:
        compose_template(["hello ", "name", "!"])  # `hello ${name}!`
    """
    pieces: list[str] = []
    for i in range(0, len(segments), 2):
        text = segments[i]
        # Text segments go in unquoted
        if isinstance(text, Text):
            text = text.value
        pieces.append(escape(render(text), TEMPLATE_QUOTE))
        hole = segments[i + 1] if i + 1 < len(segments) else None
        if hole is not None and hole != "":
            pieces.append(template_expression(hole))
    return Expr(f"{TEMPLATE_QUOTE}{''.join(pieces)}{TEMPLATE_QUOTE}", op="``")
