"""Tests for markup and stylesheet emitters."""

import pytest

from golfkit.dom import (
    font,
    increment_inner_html,
    increment_outer_html,
    kebab_case,
    render_declarations,
    render_element,
    render_stylesheet,
    set_inner_html,
    set_outer_html,
    swap_elements,
)
from golfkit.exceptions import ContractError


def test_nested_elements():
    assert (
        render_element(
            "div",
            children=render_element(
                "span",
                attributes={"id": "s", "style": "width:50%"},
                children="Hello World!",
            ),
        )
        == "<div><span id=s style=width:50%>Hello World!</span></div>"
    )


def test_self_closing_element():
    assert (
        render_element("a", attributes={"href": "#"}, children="link", self_closing=True)
        == "<a href=#>link"
    )


def test_bare_attributes():
    assert (
        render_element(
            "input",
            attributes={"disabled": None, "hidden": True, "value": ""},
            self_closing=True,
        )
        == "<input disabled hidden value>"
    )


def test_attribute_edge_cases():
    assert render_element("div", attributes={}) == "<div></div>"
    assert render_element("div", attributes={"tabindex": 0}) == "<div tabindex=0></div>"


def test_children_list_is_concatenated():
    assert render_element("p", children=["<b>a</b>", "c"]) == "<p><b>a</b>c</p>"


def test_string_mode_quotes_markup():
    assert render_element("p", children="it's", mode="string") == "\"<p>it's</p>\""


def test_template_mode():
    assert render_element("ul", children=["items"], mode="template") == "`<ul>${items}</ul>`"
    assert (
        render_element("ul", children=["a", "<hr>", "b"], mode="template")
        == "`<ul>${a}<hr>${b}</ul>`"
    )
    assert render_element("ul", children=["a", "<hr>"], mode="template") == "`<ul>${a}<hr></ul>`"
    assert render_element("ul", mode="template") == "`<ul></ul>`"
    assert render_element("br", self_closing=True, mode="template") == "`<br>`"


def test_unknown_mode_raises():
    with pytest.raises(ContractError):
        render_element("p", mode="xml")


def test_set_inner_html():
    link = render_element("a", attributes={"href": "#"}, children="link", self_closing=True)
    assert set_inner_html("elementId", link) == "elementId.innerHTML='<a href=#>link'"
    assert set_inner_html("e", "<p class='x'>") == "e.innerHTML=\"<p class='x'>\""


def test_set_inner_html_inside_template_literal():
    assert set_inner_html("e", "'\"") == "e.innerHTML=`'\"`"
    assert set_inner_html("e", "'\"", template_literal=True) == "e.innerHTML='\\'\"'"


def test_set_outer_html():
    html = render_element("a", attributes={"id": "elementId", "href": "#"}, children="link")
    assert set_outer_html("elementId", html) == "elementId.outerHTML='<a id=elementId href=#>link</a>'"


def test_increment_html():
    assert (
        increment_inner_html("elementId", render_element("p", children="hey!"))
        == "elementId.innerHTML+='<p>hey!</p>'"
    )
    assert increment_outer_html("e", ["<p>", "a", "</p>"]) == "e.outerHTML+='<p>a</p>'"


def test_swap_elements():
    assert (
        swap_elements("elementId", "ev.target")
        == "[elementId.outerHTML,$.outerHTML]=[($=ev.target).outerHTML,elementId.outerHTML]"
    )
    assert swap_elements("a", "b", tmp_var="t") == "[a.outerHTML,t.outerHTML]=[(t=b).outerHTML,a.outerHTML]"


def test_render_declarations():
    assert (
        render_declarations({"display": "flex", "justifyContent": "center"})
        == "display:flex;justify-content:center"
    )
    assert render_declarations({"width": 32}) == "width:32"


def test_render_stylesheet():
    css = render_stylesheet(
        {
            "*:hover": {"paddingLeft": 4},
            "div": {"display": "flex", "justifyContent": "center"},
            ".center": {"textAlign": "center"},
            "@media(orientation:portrait)": render_stylesheet(
                {"#root>*": {"flexDirection": "column"}}
            ),
        }
    )
    assert css == (
        "*:hover{padding-left:4}div{display:flex;justify-content:center}"
        ".center{text-align:center}@media(orientation:portrait){#root>*{flex-direction:column}}"
    )


def test_kebab_case():
    assert kebab_case("color") == "color"
    assert kebab_case("borderTopLeftRadius") == "border-top-left-radius"
    assert kebab_case("WebkitTransition") == "-webkit-transition"


def test_font():
    assert font(12) == "12px A"
    assert font(50, "%") == "50% A"
    assert font("2", "em", "Arial") == "2em Arial"


def test_swap_elements_custom_temporary():
    """The temporary variable can be overridden."""
    assert swap_elements("a", "b", tmp_var="t").startswith("[a.outerHTML,t.outerHTML]=")
