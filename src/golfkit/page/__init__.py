"""Page compiler - transforms YAML page descriptions to compact HTML."""

from golfkit.page.compiler import PageCompiler
from golfkit.page.config import ElementConfig, PageConfig, load_page, parse_page_text
from golfkit.page.renderer import Renderer
from golfkit.page.spec import Document

__all__ = [
    "PageCompiler",
    "Renderer",
    "Document",
    "ElementConfig",
    "PageConfig",
    "load_page",
    "parse_page_text",
]
