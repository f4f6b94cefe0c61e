"""Quote selection and literal rendering.

Text literals are wrapped in the first quote character that does not
occur in the content, so no escaping is needed. When every allowed
quote occurs, the content is wrapped in the first allowed quote and
only that character is escaped. Nothing else (backslashes, newlines)
is ever escaped.
"""

from __future__ import annotations

import logging
from typing import Iterable

from golfkit.exceptions import ContractError
from golfkit.printable import Printable, Text, coerce

log = logging.getLogger(__name__)

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACKTICK = "`"

# Priority order used for every selection
QUOTE_CANDIDATES: tuple[str, ...] = (SINGLE_QUOTE, DOUBLE_QUOTE, BACKTICK)


def _check_forbidden(forbidden: Iterable[str]) -> frozenset[str]:
    forbidden = frozenset(forbidden)
    unknown = forbidden.difference(QUOTE_CANDIDATES)
    if unknown:
        raise ContractError(
            f"Unknown quote character(s) in forbidden list: {sorted(unknown)}"
        )
    return forbidden


def select_quote(content: str, forbidden: Iterable[str] = ()) -> str | None:
    """Pick the first quote character absent from ``content``.

    Args:
        content: The text that will be wrapped.
        forbidden: Quote characters that must not be used, e.g. the
            delimiter of an outer literal the result will be nested in.

    Returns:
        The quote character, or None when every allowed candidate
        occurs in the content.
    """
    forbidden = _check_forbidden(forbidden)
    for quote in QUOTE_CANDIDATES:
        if quote in forbidden:
            continue
        if quote not in content:
            return quote
    return None


def fallback_quote(forbidden: Iterable[str] = ()) -> str:
    """The mandatory delimiter used when no quote is free."""
    forbidden = _check_forbidden(forbidden)
    for quote in QUOTE_CANDIDATES:
        if quote not in forbidden:
            return quote
    raise ContractError("Every quote character is forbidden")


def escape(content: str, quote: str) -> str:
    return content.replace(quote, "\\" + quote)


def unescape(content: str, quote: str) -> str:
    return content.replace("\\" + quote, quote)


def quote_text(content: str, forbidden: Iterable[str] = ()) -> str:
    """Wrap ``content`` in the cheapest safe quote.

    Example:
        quote_text("it's")  # "it's"
    """
    forbidden = _check_forbidden(forbidden)
    quote = select_quote(content, forbidden)
    if quote is not None:
        return f"{quote}{content}{quote}"

    quote = fallback_quote(forbidden)
    log.debug("No free quote for %d chars of text, escaping %s", len(content), quote)
    return f"{quote}{escape(content, quote)}{quote}"


def render_literal(value: Printable) -> str:
    """Render a value as a source-level literal.

    Unlike the operator combinators, a plain ``str`` is treated as text
    here and gets quoted. Numbers and booleans render in canonical form
    and an explicit ``Raw`` passes through.
    """
    if isinstance(value, str):
        value = Text(value)
    return coerce(value).render()


literal = render_literal
