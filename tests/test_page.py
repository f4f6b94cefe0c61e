"""Tests for the page compiler."""

import pytest

from golfkit.exceptions import ConfigError
from golfkit.page import Document, PageCompiler, Renderer, load_page, parse_page_text
from golfkit.page.config import load_stylesheet
from golfkit.page.extensions import get_golfkit_jinja_env

SAMPLE = """
lang: fr
title: "{{ name }}"
vars:
  name: Demo
  greeting: "Hi {{ name }}"
  accent: red
viewport: false
style:
  body: {margin: 0, backgroundColor: "{{ accent }}"}
  "@media(orientation:portrait)":
    "#app": {flexDirection: column}
body:
  - tag: div
    attributes: {id: app, hidden: null}
    children:
      - tag: b
        children: "{{ name }}"
      - "!"
script:
  - "{{ invoke('alert', literal(greeting)) }}"
  - "{{ assign('n', add('n', 1)) }}"
"""

EXPECTED = (
    "<!DOCTYPE html><html lang=fr><title>Demo</title>"
    "<style>body{margin:0;background-color:red}"
    "@media(orientation:portrait){#app{flex-direction:column}}</style>"
    "<div id=app hidden><b>Demo</b>!</div>"
    "<script>alert('Hi Demo');n+=1</script>"
)


def compile_text(text: str) -> str:
    config = parse_page_text(text)
    return Renderer().render(PageCompiler().compile(config))


def test_compile_sample_page():
    assert compile_text(SAMPLE) == EXPECTED


def test_vars_resolve_in_order():
    config = parse_page_text(SAMPLE)
    context = PageCompiler()._resolve_vars(config.vars)
    assert context["greeting"] == "Hi Demo"


def test_empty_page_has_boilerplate_only():
    assert compile_text("") == (
        "<!DOCTYPE html><html lang=en>"
        "<meta name=viewport content=width=device-width,initial-scale=1>"
    )


def test_pwa_switches():
    html = compile_text(
        "service_worker: /sw.js\nmanifest: m.webmanifest\nmobile: true\nscript: f()\n"
    )
    assert "<link rel=manifest href=m.webmanifest>" in html
    assert "<meta name=apple-mobile-web-app-capable content=yes>" in html
    assert html.endswith("<script>navigator.serviceWorker?.register('/sw.js');f()</script>")


def test_renderer_concatenates_parts():
    document = Document(head=["<x>"], style="a{b:c}", body=["<p>"], script=["f()", "g()"])
    assert Renderer().render(document) == "<x><style>a{b:c}</style><p><script>f();g()</script>"


def test_compile_stylesheet_without_context():
    css = PageCompiler().compile_stylesheet({"div": {"display": "flex"}, "p": "color:red"})
    assert css == "div{display:flex}p{color:red}"


def test_undefined_variable_raises():
    with pytest.raises(ConfigError, match="nope"):
        compile_text("title: '{{ nope }}'")


def test_top_level_must_be_mapping():
    with pytest.raises(ConfigError, match="mapping"):
        parse_page_text("- a\n- b\n")


def test_invalid_yaml_raises():
    with pytest.raises(ConfigError, match="YAML"):
        parse_page_text("title: [1\n")


def test_invalid_schema_raises():
    with pytest.raises(ConfigError, match="Invalid page description"):
        parse_page_text("body: 3\n")


def test_load_page_missing_file(tmp_path):
    with pytest.raises(ConfigError) as exc_info:
        load_page(tmp_path / "missing.yaml")
    assert exc_info.value.exit_code == 2


def test_load_page_from_file(tmp_path):
    path = tmp_path / "page.yaml"
    path.write_text(SAMPLE)
    config = load_page(path)
    assert config.lang == "fr"
    assert config.statements[0].startswith("{{ invoke")


def test_jinja_env_exposes_builders():
    env = get_golfkit_jinja_env()
    assert env.from_string("{{ add('a', 1) }}").render() == "a+1"
    assert env.from_string("{{ statement_list('a', 'b') }}").render() == "a;b"
    assert env.from_string("{{ add(text('a'), 1) }}").render() == "'a'+1"
    assert env.from_string("{{ element('i', children='x') }}").render() == "<i>x</i>"
    assert env.from_string("{{ 'x' | literal }}").render() == "'x'"
    assert env.from_string("{{ 'fooBar' | kebab }}").render() == "foo-bar"


def test_compile_stylesheet_mixed_rule():
    """Declarations come first, nested rules after them."""
    css = PageCompiler().compile_stylesheet(
        {"div": {"color": "red", "span": {"margin": 0}, "fontSize": "2em"}}
    )
    assert css == "div{color:red;font-size:2em;span{margin:0}}"


def test_rule_values_must_be_scalars_or_mappings():
    with pytest.raises(ConfigError, match="#app"):
        PageCompiler().compile_stylesheet({"@media(x)": {"#app": ["a", "b"]}})


def test_load_stylesheet(tmp_path):
    path = tmp_path / "style.yaml"
    path.write_text("a:\n  color: red\n")
    assert load_stylesheet(path) == {"a": {"color": "red"}}

    path.write_text("- a\n")
    with pytest.raises(ConfigError, match="mapping of selectors"):
        load_stylesheet(path)
