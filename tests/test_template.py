"""Tests for template literal composition."""

from golfkit.printable import Text
from golfkit.template import compose_template, template_expression


def test_template_expression():
    assert template_expression("a") == "${a}"


def test_compose_template():
    assert compose_template(["hello ", "name", "!"]) == "`hello ${name}!`"


def test_compose_template_ending_on_hole():
    assert compose_template(["a", "x"]) == "`a${x}`"


def test_compose_template_skips_empty_holes():
    assert compose_template([]) == "``"
    assert compose_template(["a", "", "b"]) == "`ab`"
    assert compose_template(["a", None, "b"]) == "`ab`"


def test_compose_template_escapes_backticks_in_text():
    assert compose_template(["say `hi`", "x"]) == "`say \\`hi\\`${x}`"


def test_compose_template_unwraps_text_segments():
    assert compose_template([Text("it's "), "x"]) == "`it's ${x}`"
    assert compose_template([Text("a`b")]) == "`a\\`b`"
