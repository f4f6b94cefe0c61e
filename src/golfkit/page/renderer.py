"""Renderer - converts Document IR to final HTML text."""

from golfkit.dom import render_element
from golfkit.page.spec import Document
from golfkit.statements import statement_list


class Renderer:
    """Renders Document IR to compact HTML."""

    def render(self, document: Document) -> str:
        """Render a Document to HTML text.

        Closing html/body tags are omitted, browsers imply them.

        Args:
            document: The Document IR to render.

        Returns:
            Complete HTML document as a string.
        """
        parts = list(document.head)

        if document.style:
            parts.append(render_element("style", children=document.style))

        parts.extend(document.body)

        if document.script:
            parts.append(render_element("script", children=statement_list(*document.script)))

        return "".join(parts)
