"""Jinja2 environment for templated page values.

Every string in a page description is rendered through this environment,
so values can call the golfkit builders directly:

    script:
      - "{{ assign('n', add('n', 1)) }}"
      - "{{ invoke('alert', literal(greeting)) }}"
"""

from typing import Any, Dict

from jinja2 import Environment, StrictUndefined

from golfkit import dom, operations, pwa, statements, template
from golfkit.dom import kebab_case, render_element
from golfkit.printable import Text
from golfkit.quoting import render_literal

BUILDER_MODULES = (operations, statements, template, dom, pwa)


def builder_globals() -> Dict[str, Any]:
    """Collect the public builders exposed to templates."""
    exposed: Dict[str, Any] = {}
    for module in BUILDER_MODULES:
        for name in getattr(module, "__all__", None) or dir(module):
            value = getattr(module, name)
            if name.startswith("_") or not callable(value):
                continue
            if getattr(value, "__module__", None) != module.__name__:
                continue
            exposed[name] = value

    exposed["element"] = render_element
    exposed["literal"] = render_literal
    exposed["text"] = Text
    return exposed


def get_golfkit_jinja_env() -> Environment:
    """Create a Jinja2 Environment with the builders as globals.

    Undefined variables raise instead of rendering empty, since an empty
    operand silently breaks the generated script.

    Returns:
        Configured Jinja2 Environment.
    """
    env = Environment(undefined=StrictUndefined, keep_trailing_newline=False)
    env.globals.update(builder_globals())
    env.filters["literal"] = render_literal
    env.filters["kebab"] = kebab_case
    return env
