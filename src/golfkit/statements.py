"""Statement emitters - assignments, functions, calls, conditionals, loops."""

from __future__ import annotations

import re
from typing import Sequence

from golfkit.exceptions import ContractError
from golfkit.operations import (
    ASSOCIATIVE_OPERATORS,
    COMPOUND_OPERATORS,
    PRECEDENCE,
    group,
    precedence,
)
from golfkit.printable import Expr, Printable, Text, render, render_all
from golfkit.quoting import render_literal
from golfkit.template import TEMPLATE_QUOTE
from golfkit.variables import ReservedVariables

# identifier with optional `.name` / `?.name` accesses, callable without parentheses
BARE_CALLEE = re.compile(r"^[A-Za-z_$][\w$]*(?:\??\.[A-Za-z_$][\w$]*)*$")

STATEMENT_SEPARATOR = ";"


def _clause(value: Printable | Sequence[Printable] | None, sep: str = ",") -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return sep.join(render_all(value))
    return render(value)


def prop(*parts: Printable) -> Expr:
    """Property access: ``prop("navigator", "serviceWorker?", "register")``
    -> ``navigator.serviceWorker?.register``"""
    if not parts:
        raise ContractError("prop() needs at least one part")
    rendered = render_all(parts)
    return Expr(".".join(rendered), op=".", operands=rendered)


def statement_list(*parts: Printable) -> Expr:
    rendered = render_all(parts)
    return Expr(STATEMENT_SEPARATOR.join(rendered), op=STATEMENT_SEPARATOR, operands=rendered)


def output(value: Printable) -> Expr:
    """``output(add("a", "b"))`` -> ``return(a+b)``"""
    return Expr("return" + group(value))


def _compound(target: str, source: Printable) -> str | None:
    """``target op= rest`` when it means the same as ``target=source``."""
    if not (
        isinstance(source, Expr)
        and source.op in COMPOUND_OPERATORS
        and len(source.operands) >= 2
        and source.operands[0] == target
    ):
        return None

    op = source.op
    rest = source.operands[1:]
    if len(rest) > 1 and op not in ASSOCIATIVE_OPERATORS:
        return None
    for i, operand in enumerate(rest):
        strength = precedence(operand)
        if strength > PRECEDENCE[op]:
            continue
        same_op = getattr(operand, "op", None) == op
        if strength == PRECEDENCE[op] and same_op and op in ASSOCIATIVE_OPERATORS:
            continue
        # `a+b=c` only parses as `a+(b=c)`
        if i == len(rest) - 1 and getattr(operand, "op", None) == "=":
            continue
        return None
    return f"{target}{op}={op.join(rest)}"


def assign(target: Printable, *sources: Printable) -> Expr:
    """Chain assignments right to left.

    When the last source is an operator expression whose left operand is
    the preceding target, the compound form is emitted instead, as long
    as it evaluates the same way. ``a-b-c`` stays ``a=a-b-c``.

    Examples:
        assign("a", add("a", 2))            # a+=2
        assign("c", "b", "a", sub("a", 4))  # c=b=a-=4
    """
    if not sources:
        raise ContractError("assign() needs at least one source")

    chain = render_all((target,) + sources)
    compound = _compound(chain[-2], sources[-1])
    if compound is not None:
        chain = chain[:-2] + [compound]

    return Expr("=".join(chain), op="=", operands=chain)


def define_function(
    body: Printable | Sequence[Printable],
    *,
    name: str | None = None,
    args: Sequence[str] = (),
    safe: bool = True,
    placeholder: str = ReservedVariables.FUNCTION_ARG,
) -> Expr:
    """Emit an arrow function, optionally assigned to ``name``.

    Args:
        body: An expression, or several expressions run in order.
        name: Variable the function is assigned to.
        args: Parameter names. With none, ``placeholder`` is used since
            ``_=>`` is shorter than ``()=>``.
        safe: Wrap the body in parentheses so the result can be used
            anywhere an expression is expected.

    Examples:
        define_function(42)                                  # _=>(42)
        define_function(add("a", "b"), name="f", args=["a", "b"], safe=False)
                                                             # f=(a,b)=>a+b
    """
    if isinstance(body, (list, tuple)):
        if not body:
            raise ContractError("define_function() body cannot be empty")
        text = ",".join(render_all(body))
    else:
        text = render(body)

    if safe:
        text = group(text)

    if not args:
        params = str(placeholder)
    elif len(args) == 1:
        params = args[0]
    else:
        params = group(list(args))

    fn = f"{params}=>{text}"
    if name:
        return Expr(f"{name}={fn}", op="=", operands=(name, fn))
    return Expr(fn)


def invoke(
    callee: Printable,
    args: Printable | Sequence[Printable] | None = None,
    *,
    template_call: bool = False,
) -> Expr:
    """Call a function.

    A callee that is not a plain (dotted) name, e.g. an inline function,
    is wrapped in parentheses first.

    Args:
        callee: Function name or expression.
        args: A single argument or a sequence of them.
        template_call: Tagged template call. ``args`` must then be an
            already rendered template literal, appended without parentheses.

    Examples:
        invoke("f")                  # f()
        invoke("f", ["a", Text("b")])  # f(a,'b')
        invoke("f", "`test`", template_call=True)  # f`test`
    """
    fn = render(callee)
    if not BARE_CALLEE.match(fn):
        fn = group(fn)

    if template_call:
        if args is None or isinstance(args, (list, tuple)):
            raise ContractError("A template call takes exactly one template literal")
        tpl = render(args)
        if len(tpl) < 2 or not (tpl.startswith(TEMPLATE_QUOTE) and tpl.endswith(TEMPLATE_QUOTE)):
            raise ContractError(f"Template call argument is not a template literal: {tpl!r}")
        return Expr(f"{fn}{tpl}", op="call")

    return Expr(f"{fn}({_clause(args)})", op="call")


def if_then(condition: Printable, consequent: Printable | Sequence[Printable]) -> Expr:
    """``if_then("state==0", "render()")`` -> ``if(state==0)render()``

    A consequent holding several statements is wrapped in braces.
    """
    body = _clause(consequent, sep=STATEMENT_SEPARATOR)
    if STATEMENT_SEPARATOR in body:
        body = group(body, "}")
    return Expr(f"if({render(condition)}){body}")


def loop(
    condition: Printable | Sequence[Printable],
    *,
    body: Printable | Sequence[Printable] | None = None,
    init: Printable | Sequence[Printable] | None = None,
    body2: Printable | Sequence[Printable] | None = None,
) -> Expr:
    """for loop

    ``body2`` runs after every iteration, in the loop header.

    Example:
        loop(decrement("a"), init=assign("a", 3), body="compute()", body2="log()")
        # for(a=3;a--;log())compute()
    """
    return Expr(f"for({_clause(init)};{_clause(condition)};{_clause(body2)}){_clause(body)}")


def _step(variable: str, token: str, step: Printable, before: bool) -> Expr:
    if step == 1 and not isinstance(step, bool):
        return Expr(f"{token}{token}{variable}" if before else f"{variable}{token}{token}")
    return Expr(f"{variable}{token}={render(step)}")


def increment(variable: str, step: Printable = 1, *, before: bool = False) -> Expr:
    """``a++``, ``++a`` with ``before=True``, or ``a+=2`` for other steps."""
    return _step(variable, "+", step, before)


def decrement(variable: str, step: Printable = 1, *, before: bool = False) -> Expr:
    return _step(variable, "-", step, before)


def func_constructor(args: Sequence[str], body: str) -> Expr:
    """``func_constructor(["a", "b"], output(add("a", "b")))``
    -> ``Function('a','b','return(a+b)')``"""
    pieces = [render_literal(Text(a)) for a in args] + [render_literal(Text(body))]
    return Expr(f"Function({','.join(pieces)})")
