"""Operator combinators.

Each combinator joins its operands with one operator token. Operands are
rendered as printables: plain strings are identifiers or expressions and
are never quoted, use ``Text`` for string literals. No parentheses are
inserted for precedence, wrap sub-expressions with ``group`` instead.
"""

from __future__ import annotations

import re
from typing import Sequence

from golfkit.exceptions import ContractError
from golfkit.printable import Expr, Printable, render, render_all

# Tokens that have a compound assignment form (``a+=b``)
COMPOUND_OPERATORS = frozenset(
    {"+", "-", "*", "/", "%", "**", "<<", ">>", "&", "|", "^", "&&", "||"}
)

# ``a op b op c`` equals ``a op (b op c)``
ASSOCIATIVE_OPERATORS = frozenset({"+", "*", "&", "|", "^", "&&", "||", "**"})

# Binding strength of binary operators, higher binds tighter
PRECEDENCE = {
    ";": 0,
    "=": 1,
    "?:": 2,
    "||": 4,
    "&&": 5,
    "|": 6,
    "^": 7,
    "&": 8,
    "==": 9,
    "<": 10,
    ">": 10,
    "<<": 11,
    ">>": 11,
    "+": 12,
    "-": 12,
    "*": 13,
    "/": 13,
    "%": 13,
    "**": 14,
}
UNARY_PRECEDENCE = 15
ATOM_PRECEDENCE = 20

# Outer forms that cannot be split by a neighbouring operator
ATOMIC_OPERATORS = frozenset({".", "()", "call", "``"})

# names, property chains, numbers and unescaped string literals
ATOM = re.compile(
    r"""^(?:-?[\w$.]+(?:[eE][+-]?\d+)?|'[^'\\]*'|"[^"\\]*"|`[^`\\$]*`)$"""
)


def precedence(value: Printable) -> int:
    """Binding strength of the outermost operator of an operand.

    Text without operator metadata is an atom only when it is a plain
    name, number or string literal. Anything else binds loosest.
    """
    if isinstance(value, Expr) and value.op is not None:
        if value.op in ATOMIC_OPERATORS:
            return ATOM_PRECEDENCE
        if len(value.operands) == 1:
            # a one-operand join is just its operand
            if value == value.operands[0]:
                return precedence(value.operands[0])
            return UNARY_PRECEDENCE
        return PRECEDENCE.get(value.op, 0)
    return ATOM_PRECEDENCE if ATOM.match(render(value)) else 0


def join(op: str, operands: Sequence[Printable], min_arity: int = 1) -> Expr:
    """Join rendered operands with an operator token.

    Raises:
        ContractError: If fewer than ``min_arity`` operands are given.
    """
    if len(operands) < min_arity:
        raise ContractError(
            f"Operator '{op}' needs at least {min_arity} operand(s), got {len(operands)}"
        )
    parts = render_all(operands)
    return Expr(op.join(parts), op=op, operands=parts)


def _prefix(token: str, value: Printable) -> Expr:
    rendered = render(value)
    return Expr(f"{token}{rendered}", op=token, operands=(rendered,))


def add(*values: Printable) -> Expr:
    """addition(s): ``add(1.2, "3", True)`` -> ``1.2+3+true``"""
    return join("+", values)


def sub(*values: Printable) -> Expr:
    return join("-", values)


def mul(*values: Printable) -> Expr:
    return join("*", values)


def div(*values: Printable) -> Expr:
    return join("/", values)


def mod(*values: Printable) -> Expr:
    return join("%", values)


def pow(*values: Printable) -> Expr:
    """power(s): ``pow("a", 2)`` -> ``a**2``"""
    return join("**", values)


def and_(*values: Printable) -> Expr:
    return join("&&", values)


def or_(*values: Printable) -> Expr:
    return join("||", values)


def band(*values: Printable) -> Expr:
    return join("&", values)


def bor(*values: Printable) -> Expr:
    return join("|", values)


def xor(*values: Printable) -> Expr:
    return join("^", values)


def left_shift(*values: Printable) -> Expr:
    return join("<<", values)


def right_shift(*values: Printable) -> Expr:
    return join(">>", values)


def is_lower(*values: Printable) -> Expr:
    """lower than comparison(s): ``is_lower("a", 3)`` -> ``a<3``"""
    return join("<", values, min_arity=2)


is_less = is_lower


def is_greater(*values: Printable) -> Expr:
    return join(">", values, min_arity=2)


is_more = is_greater


def is_equal(*values: Printable) -> Expr:
    return join("==", values, min_arity=2)


def is_different(*values: Printable) -> Expr:
    """Truthy when integer operands differ (XOR is shorter than ``!=``)."""
    return join("^", values, min_arity=2)


def not_(value: Printable) -> Expr:
    """logical NOT: ``not_(1)`` -> ``!1``"""
    return _prefix("!", value)


def bnot(value: Printable) -> Expr:
    return _prefix("~", value)


def minus(value: Printable) -> Expr:
    return _prefix("-", value)


def cast_boolean(value: Printable) -> Expr:
    return _prefix("!!", value)


def cast_number(value: Printable) -> Expr:
    return _prefix("+", value)


def cast_int(value: Printable) -> Expr:
    """``cast_int(1.2)`` -> ``1.2|0``"""
    return join("|", [value, 0])


def round_(value: Printable) -> Expr:
    """``round_(1.2)`` -> ``1.2+.5|0``"""
    return Expr(f"{render(value)}+.5|0", op="|")


def if_else(condition: Printable, if_true: Printable, if_false: Printable) -> Expr:
    """ternary condition: ``if_else("a>b", 1, 2)`` -> ``a>b?1:2``"""
    return Expr(
        f"{render(condition)}?{render(if_true)}:{render(if_false)}", op="?:"
    )


def group(content: Printable | Sequence[Printable], border: str = ")") -> Expr:
    """Wrap content in parentheses, or braces when ``border`` is ``}``.

    A sequence is comma-joined first.

    Examples:
        mul(3, group(add(1, 2)))   # 3*(1+2)
        group(["a", "b", "c"])     # (a,b,c)
        group("a;b", "}")          # {a;b}
    """
    if border == ")":
        opening = "("
    elif border == "}":
        opening = "{"
    else:
        raise ContractError(f"Unsupported group border: {border!r}")

    if isinstance(content, (list, tuple)):
        inner = ",".join(render_all(content))
    else:
        inner = render(content)
    return Expr(f"{opening}{inner}{border}", op=opening + border)
