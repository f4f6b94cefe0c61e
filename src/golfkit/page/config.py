"""Page description parsing.

Schema of a page YAML file:
- lang / title: document language and title
- vars: values available to every templated string, resolved in order
- viewport / mobile / manifest / service_worker: boilerplate switches
- style: selector -> declarations mapping, raw CSS text, or nested rules
- body: elements (tag, attributes, children) or raw markup strings
- script: statements joined into a single script element
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from golfkit.exceptions import ConfigError

Scalar = Union[str, int, float, bool, None]
RuleBody = Union[str, dict[str, Any]]


class ElementConfig(BaseModel):
    """A single element of the page body."""

    tag: str = Field(description="Element tag name")
    attributes: dict[str, Scalar] = Field(
        default_factory=dict, description="Attributes in output order"
    )
    children: list[Union["ElementConfig", str]] | str = Field(
        default_factory=list, description="Child elements or raw markup"
    )
    self_closing: bool = Field(default=False, description="Omit the closing tag")


ElementConfig.model_rebuild()


class PageConfig(BaseModel):
    """Top-level page description."""

    lang: str = "en"
    title: str | None = None
    vars: dict[str, Any] = Field(
        default_factory=dict, description="Template variables, resolved in order"
    )
    viewport: bool = Field(default=True, description="Emit the viewport meta tag")
    mobile: bool = Field(default=False, description="Emit the mobile-web-app meta tags")
    manifest: str | None = Field(default=None, description="Web manifest path")
    service_worker: str | None = Field(
        default=None, description="Service worker path, registered in the script"
    )
    style: dict[str, RuleBody] = Field(default_factory=dict)
    body: list[Union[ElementConfig, str]] = Field(default_factory=list)
    script: list[str] | str = Field(default_factory=list)

    @property
    def statements(self) -> list[str]:
        if isinstance(self.script, str):
            return [self.script]
        return list(self.script)


def parse_page_text(text: str, source: str | None = None) -> PageConfig:
    """Parse a YAML string into a validated PageConfig."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}", source) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Page description must be a mapping at the top level", source)

    try:
        return PageConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid page description:\n{exc}", source) from exc


def load_page(path: str | Path) -> PageConfig:
    """Load a page description from a YAML file."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read file: {exc.strerror}", str(p)) from exc
    return parse_page_text(text, source=str(p))


def load_stylesheet(path: str | Path) -> dict[str, RuleBody]:
    """Load a bare selector mapping, as used by ``golfkit style``."""
    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Could not read file: {exc.strerror}", str(p)) from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}", str(p)) from exc

    if not isinstance(data, dict):
        raise ConfigError("Stylesheet must be a mapping of selectors", str(p))
    return data
