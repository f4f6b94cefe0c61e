"""golfkit - composable builders for ultra-compact JS, HTML and CSS.

Every builder is a pure function returning an expression string; callers
compose them bottom-up. Quoting is chosen per call to avoid escapes.
"""

from golfkit._version import __version__
from golfkit.dom import (
    INLINE_EVENT_ARG_NAME,
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
from golfkit.exceptions import ConfigError, ContractError, GolfkitError
from golfkit.operations import (
    add,
    and_,
    band,
    bnot,
    bor,
    cast_boolean,
    cast_int,
    cast_number,
    div,
    group,
    if_else,
    is_different,
    is_equal,
    is_greater,
    is_less,
    is_lower,
    is_more,
    join,
    left_shift,
    minus,
    mod,
    mul,
    not_,
    or_,
    pow,
    right_shift,
    round_,
    sub,
    xor,
)
from golfkit.printable import Boolean, Expr, Number, Raw, Text, coerce, render
from golfkit.pwa import (
    html_doctype,
    manifest_link,
    mobile_meta,
    register_service_worker,
    title_tag,
    viewport_meta,
)
from golfkit.quoting import literal, quote_text, render_literal, select_quote
from golfkit.statements import (
    assign,
    decrement,
    define_function,
    func_constructor,
    if_then,
    increment,
    invoke,
    loop,
    output,
    prop,
    statement_list,
)
from golfkit.template import compose_template, template_expression
from golfkit.variables import ReservedVariables

__all__ = [
    "__version__",
    # printables
    "Text",
    "Number",
    "Boolean",
    "Raw",
    "Expr",
    "coerce",
    "render",
    # quoting
    "select_quote",
    "quote_text",
    "render_literal",
    "literal",
    # operators
    "join",
    "add",
    "sub",
    "mul",
    "div",
    "mod",
    "pow",
    "and_",
    "or_",
    "not_",
    "band",
    "bor",
    "bnot",
    "xor",
    "left_shift",
    "right_shift",
    "is_lower",
    "is_less",
    "is_greater",
    "is_more",
    "is_equal",
    "is_different",
    "if_else",
    "cast_boolean",
    "cast_number",
    "cast_int",
    "round_",
    "minus",
    "group",
    # statements
    "prop",
    "statement_list",
    "output",
    "assign",
    "define_function",
    "invoke",
    "if_then",
    "loop",
    "increment",
    "decrement",
    "func_constructor",
    # templates
    "compose_template",
    "template_expression",
    # markup
    "INLINE_EVENT_ARG_NAME",
    "render_element",
    "set_inner_html",
    "set_outer_html",
    "increment_inner_html",
    "increment_outer_html",
    "swap_elements",
    "render_stylesheet",
    "render_declarations",
    "kebab_case",
    "font",
    # helpers
    "register_service_worker",
    "manifest_link",
    "viewport_meta",
    "mobile_meta",
    "html_doctype",
    "title_tag",
    "ReservedVariables",
    # errors
    "GolfkitError",
    "ContractError",
    "ConfigError",
]
