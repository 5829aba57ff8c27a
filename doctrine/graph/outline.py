"""Render a table of contents for one guide."""

from __future__ import annotations

from typing import List

from doctrine.models.document import GuideDocument


def render_outline(document: GuideDocument, max_level: int = 3) -> str:
    """Nested Markdown list of the document's level-2+ headings."""
    lines: List[str] = []
    for section in document.sections:
        if section.level < 2 or section.level > max_level:
            continue
        indent = "  " * (section.level - 2)
        lines.append(f"{indent}- [{section.title}](#{section.anchor})")
    return "\n".join(lines)
