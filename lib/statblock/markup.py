# statblock/markup.py
"""
Markup resolution for narrative fields.

Trait, special and extra descriptions carry inline Markdown (`_emphasis_`,
links, `**bold**`). The formatter never interprets it; it hands each snippet
to a resolver together with the placeholder block the result belongs in.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol

import markdown

from statblock.blocks import Container
from statblock.config import get_markdown_extensions

logger = logging.getLogger(__name__)


class MarkupResolver(Protocol):
    async def resolve(self, text: str, target: Container, source_path: str = "") -> None:
        """Render *text* and write the result into *target*."""
        ...


class MarkdownResolver:
    """Resolve snippets with Python-Markdown and attach the HTML fragment.

    A single `<p>` wrapper is stripped by default so that an item renders as
    one inline run inside its block.
    """

    def __init__(self, extensions: Optional[Iterable[str]] = None, inline: bool = True):
        if extensions is None:
            extensions = get_markdown_extensions()
        self.extensions = list(extensions)
        self.inline = inline

    def to_html(self, text: str) -> str:
        html_fragment = markdown.markdown(text, extensions=self.extensions)
        if self.inline:
            html_fragment = _unwrap_paragraph(html_fragment)
        return html_fragment

    async def resolve(self, text: str, target: Container, source_path: str = "") -> None:
        # Errors from markdown propagate; the caller decides how to show them
        logger.debug("Resolving %d chars of markup (source=%r)", len(text), source_path)
        target.add_html(self.to_html(text))


def _unwrap_paragraph(fragment: str) -> str:
    fragment = fragment.strip()
    if (
        fragment.startswith("<p>")
        and fragment.endswith("</p>")
        and fragment.count("<p>") == 1
    ):
        return fragment[len("<p>"):-len("</p>")]
    return fragment
