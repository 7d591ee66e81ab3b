# statblock/blocks.py
"""
Output tree for a rendered statblock.

A `Block` is a node with a kind, an optional CSS-style class and either
literal text or children. The formatter only talks to the `Container`
protocol, so any sink that offers the same five operations can stand in for
`Block` (a Qt document builder, a DOM bridge, ...).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Protocol

# Kinds of node
DIV = "div"
HEADING = "heading"
SPAN = "span"
HTML = "html"
MARKUP = "markup"


class Container(Protocol):
    def add_block(self, cls: str = "", text: Optional[str] = None) -> "Container": ...

    def add_heading(self, level: int, text: str, cls: str = "") -> "Container": ...

    def add_container(self, cls: str = "") -> "Container": ...

    def add_span(self, text: str, cls: str = "") -> "Container": ...

    def add_html(self, fragment: str) -> "Container": ...


@dataclass
class Block:
    kind: str = DIV
    cls: str = ""
    text: Optional[str] = None
    level: int = 0
    section: Optional[str] = None
    # Markup placeholders: raw source text and whether a resolver has filled it
    source: Optional[str] = None
    resolved: bool = False
    children: List[Block] = field(default_factory=list)

    # ── Container operations ─────────────────────────────────────────

    def _append(self, child: Block) -> Block:
        self.children.append(child)
        return child

    def add_block(self, cls: str = "", text: Optional[str] = None) -> Block:
        return self._append(Block(DIV, cls=cls, text=text))

    def add_heading(self, level: int, text: str, cls: str = "") -> Block:
        return self._append(Block(HEADING, cls=cls, text=text, level=level))

    def add_container(self, cls: str = "") -> Block:
        return self._append(Block(DIV, cls=cls))

    def add_span(self, text: str, cls: str = "") -> Block:
        return self._append(Block(SPAN, cls=cls, text=text))

    def add_html(self, fragment: str) -> Block:
        return self._append(Block(HTML, text=fragment))

    def add_markup(self, source: str) -> Block:
        return self._append(Block(MARKUP, source=source))

    # ── Queries ──────────────────────────────────────────────────────

    def walk(self) -> Iterator[Block]:
        """Depth-first, document order, including self."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_section(self, section: str) -> List[Block]:
        return [b for b in self.walk() if b.section == section]

    def sections(self) -> List[str]:
        """Section names in document order (nested groups included)."""
        return [b.section for b in self.walk() if b.section is not None and b is not self]

    def markup_nodes(self) -> List[Block]:
        return [b for b in self.walk() if b.kind == MARKUP]

    def plain_text(self) -> str:
        """Literal text of this node and its descendants, concatenated.

        Resolved markup contributes whatever the resolver wrote into it;
        unresolved markup contributes its raw source.
        """
        if self.kind == MARKUP and not self.resolved:
            return self.source or ""
        parts = [self.text] if self.text else []
        parts.extend(child.plain_text() for child in self.children)
        return "".join(parts)

    def has_class(self, name: str) -> bool:
        return name in self.cls.split()
