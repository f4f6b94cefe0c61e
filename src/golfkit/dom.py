"""HTML elements, DOM mutation snippets and CSS rules."""

from __future__ import annotations

import re
from typing import Any, Mapping, Sequence, Union

from golfkit.exceptions import ContractError
from golfkit.printable import Expr, Printable, Text, render
from golfkit.quoting import BACKTICK, quote_text
from golfkit.template import compose_template
from golfkit.variables import ReservedVariables

# the argument name for inline event handlers
INLINE_EVENT_ARG_NAME = "event"

ELEMENT_MODES = ("html", "string", "template")

_UPPER = re.compile(r"[A-Z]")

Declarations = Mapping[str, Printable]
Stylesheet = Mapping[str, Union[str, Declarations]]


def kebab_case(name: str) -> str:
    """``justifyContent`` -> ``justify-content``"""
    return _UPPER.sub(lambda m: "-" + m.group(0).lower(), name)


def _attributes(attributes: Mapping[str, Any] | None) -> str:
    if not attributes:
        return ""
    pairs = []
    for key, value in attributes.items():
        if value is None or value == "" or value is True:
            pairs.append(key)
        else:
            pairs.append(f"{key}={render(value)}")
    return " " + " ".join(pairs)


def render_element(
    tag_name: str,
    *,
    attributes: Mapping[str, Any] | None = None,
    children: str | Sequence[str] = "",
    self_closing: bool = False,
    mode: str = "html",
) -> Expr:
    """Generate an HTML element.

    Attribute values are emitted unquoted; quote them beforehand when the
    value holds spaces or ``>``. ``None``, ``""`` and ``True`` give a bare
    attribute name.

    Args:
        tag_name: Element tag.
        attributes: Attribute mapping, rendered in insertion order.
        children: Child markup, or a list of pieces.
        self_closing: Omit the closing tag.
        mode: ``html`` for plain markup, ``string`` for a quoted JS literal
            of that markup, ``template`` for a JS template literal where
            children alternate between expressions and literal markup,
            starting with an expression right after the opening tag.

    Example:
        render_element("div", children=render_element(
            "span", attributes={"id": "s", "style": "width:50%"}, children="Hello World!"))
        # <div><span id=s style=width:50%>Hello World!</span></div>
    """
    if mode not in ELEMENT_MODES:
        raise ContractError(f"Unknown element mode: {mode!r}")

    tag = f"<{tag_name}{_attributes(attributes)}>"
    close_tag = "" if self_closing else f"</{tag_name}>"
    child_list = list(children) if isinstance(children, (list, tuple)) else [children]

    if mode == "template":
        segments = [tag, *child_list]
        if not self_closing:
            if len(segments) % 2:
                segments.append("")
            segments.append(close_tag)
        return compose_template(segments)

    el = f"{tag}{''.join(child_list)}{close_tag}"
    if mode == "string":
        return Expr(Text(el).render())
    return Expr(el)


def _write_html(
    element: str,
    html: str | Sequence[str],
    prop: str,
    operator: str = "=",
    template_literal: bool = False,
) -> Expr:
    markup = html if isinstance(html, str) else "".join(html)
    forbidden = (BACKTICK,) if template_literal else ()
    return Expr(f"{element}.{prop}{operator}{quote_text(markup, forbidden)}")


def set_inner_html(
    element: str, html: str | Sequence[str], *, template_literal: bool = False
) -> Expr:
    """Set the innerHTML of an element.

    ``element`` is any expression for an element, e.g. its id through
    named access on the window object. Set ``template_literal`` when the
    result will itself be placed inside a template literal.

    Example:
        set_inner_html("elementId", render_element("a", attributes={"href": "#"},
                       children="link", self_closing=True))
        # elementId.innerHTML='<a href=#>link'
    """
    return _write_html(element, html, "innerHTML", template_literal=template_literal)


def set_outer_html(
    element: str, html: str | Sequence[str], *, template_literal: bool = False
) -> Expr:
    return _write_html(element, html, "outerHTML", template_literal=template_literal)


def increment_inner_html(element: str, html: str | Sequence[str]) -> Expr:
    """``elementId.innerHTML+='<p>hey!</p>'``"""
    return _write_html(element, html, "innerHTML", operator="+=")


def increment_outer_html(element: str, html: str | Sequence[str]) -> Expr:
    return _write_html(element, html, "outerHTML", operator="+=")


def swap_elements(
    element1: str,
    element2: str,
    tmp_var: str = ReservedVariables.TEMPORARY_VAR,
) -> Expr:
    """Swap the positions of two elements.

    Example:
        swap_elements("elementId", "ev.target")
        # [elementId.outerHTML,$.outerHTML]=[($=ev.target).outerHTML,elementId.outerHTML]
    """
    tmp = str(tmp_var)
    return Expr(
        f"[{element1}.outerHTML,{tmp}.outerHTML]="
        f"[({tmp}={element2}).outerHTML,{element1}.outerHTML]"
    )


def render_declarations(style: Declarations) -> Expr:
    """``{"display": "flex", "justifyContent": "center"}``
    -> ``display:flex;justify-content:center``"""
    return Expr(";".join(f"{kebab_case(key)}:{render(value)}" for key, value in style.items()))


def render_stylesheet(stylesheet: Stylesheet) -> Expr:
    """Generate CSS ready for a style tag, or for nesting in another rule.

    A rule body is either raw CSS text (e.g. a nested stylesheet) or a
    declaration mapping.

    Example:
        render_stylesheet({
            "div": {"display": "flex"},
            "@media(orientation:portrait)": render_stylesheet({"#root>*": {"flexDirection": "column"}}),
        })
        # div{display:flex}@media(orientation:portrait){#root>*{flex-direction:column}}
    """
    rules = []
    for selector, style in stylesheet.items():
        body = style if isinstance(style, str) else render_declarations(style)
        rules.append(f"{selector}{{{body}}}")
    return Expr("".join(rules))


def font(size_value: int | str, size_unit: str = "px", family: str = "A") -> str:
    """CSS font shorthand: ``font(12)`` -> ``12px A``"""
    return f"{size_value}{size_unit} {family}"
