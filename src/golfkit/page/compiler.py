"""Compiler - transforms a PageConfig into Document IR."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Union

from jinja2 import TemplateError

from golfkit.dom import render_declarations, render_element, render_stylesheet
from golfkit.exceptions import ConfigError
from golfkit.page.config import ElementConfig, PageConfig, RuleBody
from golfkit.page.extensions import get_golfkit_jinja_env
from golfkit.page.spec import Document
from golfkit.printable import Text
from golfkit.pwa import (
    html_doctype,
    manifest_link,
    mobile_meta,
    register_service_worker,
    title_tag,
    viewport_meta,
)

log = logging.getLogger(__name__)


class PageCompiler:
    """Compiles a PageConfig to Document IR."""

    def __init__(self) -> None:
        self.env = get_golfkit_jinja_env()

    def compile(self, config: PageConfig) -> Document:
        """Compile a page description.

        1. Resolve vars in declaration order
        2. Build head boilerplate (doctype, title, meta, manifest)
        3. Render stylesheet, body elements and script statements

        Args:
            config: The validated page description.

        Returns:
            Document IR ready for rendering to text.
        """
        context = self._resolve_vars(config.vars)
        log.debug("Resolved %d page vars", len(context))

        head = [html_doctype(self._render(config.lang, context))]
        if config.title is not None:
            head.append(title_tag(self._render(config.title, context)))
        if config.viewport:
            head.append(viewport_meta())
        if config.mobile:
            head.append(mobile_meta())
        if config.manifest:
            head.append(manifest_link(self._render(config.manifest, context)))

        style = self.compile_stylesheet(config.style, context)
        body = [self._compile_node(node, context) for node in config.body]

        script: List[str] = []
        if config.service_worker:
            path = self._render(config.service_worker, context)
            script.append(register_service_worker(Text(path)))
        for statement in config.statements:
            rendered = self._render(statement, context)
            if rendered:
                script.append(rendered)

        log.info(
            "Compiled page: %d head part(s), %d element(s), %d statement(s)",
            len(head),
            len(body),
            len(script),
        )
        return Document(head=head, style=style, body=body, script=script)

    def _resolve_vars(self, vars_dict: Mapping[str, Any]) -> Dict[str, Any]:
        """Resolve vars by rendering any {{ }} references in their values.

        Later vars may reference earlier ones.
        """
        resolved: Dict[str, Any] = {}
        for name, value in vars_dict.items():
            if isinstance(value, str) and "{{" in value:
                value = self._render(value, resolved)
            resolved[name] = value
        return resolved

    def _render(self, value: str, context: Mapping[str, Any]) -> str:
        if "{{" not in value and "{%" not in value:
            return value
        try:
            return self.env.from_string(value).render(**context)
        except TemplateError as exc:
            raise ConfigError(f"Failed to render {value!r}: {exc}") from exc

    def _render_value(self, value: Any, context: Mapping[str, Any]) -> Any:
        if isinstance(value, str):
            return self._render(value, context)
        return value

    def compile_stylesheet(
        self, rules: Mapping[str, RuleBody], context: Mapping[str, Any] | None = None
    ) -> str:
        """Render selector rules.

        Scalar values of a rule are declarations, mapping values are nested
        rules: ``{"div": {"color": "red", "span": {"margin": 0}}}`` renders
        ``div{color:red;span{margin:0}}``.
        """
        context = context or {}
        sheet: Dict[str, str] = {}
        for selector, body in rules.items():
            selector = self._render(selector, context)
            if isinstance(body, str):
                sheet[selector] = self._render(body, context)
                continue
            if not isinstance(body, dict):
                raise ConfigError(f"Rule '{selector}' must be CSS text or a mapping")

            declarations: Dict[str, Any] = {}
            nested: Dict[str, RuleBody] = {}
            for key, value in body.items():
                if isinstance(value, dict):
                    nested[key] = value
                elif isinstance(value, (str, int, float)):
                    declarations[key] = self._render_value(value, context)
                else:
                    raise ConfigError(
                        f"Value of '{key}' in rule '{selector}' must be a scalar or a mapping"
                    )

            parts = []
            if declarations:
                parts.append(render_declarations(declarations))
            if nested:
                parts.append(self.compile_stylesheet(nested, context))
            sheet[selector] = ";".join(parts)
        return render_stylesheet(sheet)

    def _compile_node(
        self, node: Union[ElementConfig, str], context: Mapping[str, Any]
    ) -> str:
        if isinstance(node, str):
            return self._render(node, context)

        attributes = {k: self._render_value(v, context) for k, v in node.attributes.items()}
        children = node.children if isinstance(node.children, list) else [node.children]
        return render_element(
            node.tag,
            attributes=attributes,
            children=[self._compile_node(child, context) for child in children],
            self_closing=node.self_closing,
        )
