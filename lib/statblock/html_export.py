# statblock/html_export.py
"""Serialise a rendered block tree to an HTML fragment."""
from __future__ import annotations

from html import escape

from statblock.blocks import HEADING, HTML, MARKUP, SPAN, Block


def _open(tag: str, cls: str) -> str:
    return f'<{tag} class="{escape(cls)}">' if cls else f"<{tag}>"


def to_html(block: Block) -> str:
    """Literal text is escaped; resolved markup fragments are inserted as-is.

    Unresolved markup placeholders fall back to their escaped source so the
    fragment is still readable.
    """
    return "".join(_render(block))


def _render(block: Block):
    if block.kind == HTML:
        yield block.text or ""
        return

    if block.kind == MARKUP:
        if not block.resolved:
            yield escape(block.source or "")
            return
        for child in block.children:
            yield from _render(child)
        return

    if block.kind == HEADING:
        tag = f"h{min(max(block.level, 1), 6)}"
    elif block.kind == SPAN:
        tag = "span"
    else:
        tag = "div"

    yield _open(tag, block.cls)
    if block.text:
        yield escape(block.text)
    for child in block.children:
        yield from _render(child)
    yield f"</{tag}>"
