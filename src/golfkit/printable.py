"""Printable values - the operands every builder accepts.

A printable is one of four variants:

- ``Text``: a textual literal, rendered quoted by the literal renderer
- ``Number``: rendered in canonical JS number form
- ``Boolean``: rendered as ``true`` / ``false``
- ``Raw``: an identifier or already-rendered expression, rendered as-is

Plain Python values are coerced: ``str`` means ``Raw`` (the caller already
wrote the expression), numbers and booleans map to their variants. Use
``Text`` explicitly whenever a string literal is intended.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Sequence, Union

from golfkit.exceptions import ContractError

_EXPONENT = re.compile(r"e([+-])0*(\d)")


class Expr(str):
    """An expression string that remembers how it was built.

    Equal to its text and usable anywhere a ``str`` is. ``op`` is the
    operator token that joined ``operands`` (both ``None``/empty for
    leaf expressions). Any string operation returns a plain ``str``.
    """

    op: str | None
    operands: tuple[str, ...]

    def __new__(
        cls, text: str, op: str | None = None, operands: Sequence[str] = ()
    ) -> "Expr":
        obj = super().__new__(cls, text)
        obj.op = op
        obj.operands = tuple(operands)
        return obj


@dataclass(frozen=True)
class Text:
    """A string literal."""

    value: str

    def render(self) -> str:
        from golfkit.quoting import quote_text

        return quote_text(self.value)


@dataclass(frozen=True)
class Number:
    value: int | float

    def render(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class Boolean:
    value: bool

    def render(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Raw:
    """An identifier or expression that is emitted untouched."""

    source: str

    def render(self) -> str:
        return self.source


PrintableVariant = Union[Text, Number, Boolean, Raw]
Printable = Union[PrintableVariant, str, int, float, bool]


def format_number(value: int | float) -> str:
    """Format a number the way JS prints it."""
    if isinstance(value, bool):
        raise ContractError(f"Expected a number, got boolean {value!r}")
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return _EXPONENT.sub(r"e\1\2", repr(value))


def coerce(value: Printable) -> PrintableVariant:
    """Map a plain Python value onto its printable variant."""
    if isinstance(value, (Text, Number, Boolean, Raw)):
        return value
    # bool first: it is an int subclass
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, (int, float)):
        return Number(value)
    if isinstance(value, str):
        return Raw(value)
    raise ContractError(f"Cannot print value of type {type(value).__name__}")


def render(value: Printable) -> str:
    """Render any printable to its source text."""
    return coerce(value).render()


def render_all(values: Sequence[Printable]) -> list[str]:
    return [render(v) for v in values]
