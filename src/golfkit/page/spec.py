"""Page IR - compiled document parts before final concatenation."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Document:
    """A compiled page, every part already rendered to compact text."""

    head: List[str] = field(default_factory=list)  # doctype, title, meta, links
    style: str = ""  # stylesheet text, without the style tag
    body: List[str] = field(default_factory=list)  # rendered elements
    script: List[str] = field(default_factory=list)  # statements, joined with ;
