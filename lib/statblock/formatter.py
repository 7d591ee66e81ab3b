# statblock/formatter.py
"""
StatblockFormatter — turns a StatblockRecord into a tree of display blocks.

Rendering happens in two passes. The first places every block synchronously,
in fixed section order, leaving a placeholder for each snippet of embedded
markup. The second hands those placeholders to the markup resolver, in
document order, and awaits them. Block order therefore never depends on how
long a resolver takes.

Sections, top to bottom (each only if it has something to show):

    header      source attribution + creature name (always)
    blurb       narrative line
    role        "Large 4th level troop [Mook]"
    initiative  "Initiative: +5"
    vuln        "Vulnerability: fire"
    resist      "Resistance: cold 16+"
    attack      one per attack
    trait       one per trait
    specials    "Nastier Specials" heading + one block per special
    numbers     AC/PD/MD, HP, spacer (always)
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

from statblock import config
from statblock.blocks import Block, Container
from statblock.config import Layout
from statblock.formatting import bonus, role_text
from statblock.markup import MarkdownResolver, MarkupResolver
from statblock.record import Attack, AttackType, SimpleItem, StatblockRecord, validate_statblock

logger = logging.getLogger(__name__)

ROOT_CLASS = "statblock-13a"
SPECIALS_HEADING = "Nastier Specials"

# (markup text, placeholder container)
_Pending = Tuple[str, Container]


def _present(value: Any) -> bool:
    return value is not None and value != ""


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _labelled(label: str, value: Any) -> str:
    return f"{label} {_text(value)}".rstrip()


def _tag(node: Container, section: str) -> Container:
    if isinstance(node, Block):
        node.section = section
    return node


class StatblockFormatter:
    def __init__(
        self,
        record: Union[StatblockRecord, Mapping[str, Any]],
        resolver: Optional[MarkupResolver] = None,
        layout: Union[Layout, str, None] = None,
        concurrent: Optional[bool] = None,
        source_path: str = "",
    ):
        self.record = StatblockRecord.from_dict(record)
        self.resolver = resolver if resolver is not None else MarkdownResolver()
        self.layout = Layout.parse(layout) if layout is not None else config.get_layout()
        self.concurrent = concurrent if concurrent is not None else config.get_concurrent()
        self.source_path = source_path or ""

    # ── Public API ───────────────────────────────────────────────────

    @property
    def role_text(self) -> Optional[str]:
        r = self.record
        return role_text(r.size, r.level, r.role)

    def build(self, container: Optional[Container] = None) -> Tuple[Container, List[_Pending]]:
        """Place every block without resolving markup.

        Returns the statblock root and the markup still to resolve, in
        document order.
        """
        if container is None:
            root: Container = Block(cls=ROOT_CLASS)
        else:
            root = container.add_container(ROOT_CLASS)

        pending: List[_Pending] = []
        grouped = self.layout is Layout.GROUPED

        self._render_header(root)

        props = root
        if grouped and self._has_properties():
            props = _tag(root.add_container("group"), "properties")
        self._render_properties(props)

        if self.record.attacks:
            parent = _tag(root.add_container("group"), "attacks") if grouped else root
            for attack in self.record.attacks:
                self._render_attack(attack, parent, pending)

        if self.record.traits:
            parent = _tag(root.add_container("group"), "traits") if grouped else root
            for trait in self.record.traits:
                _tag(self._render_simple_item(trait, parent, pending), "trait")

        if self.record.specials:
            parent = _tag(root.add_container("group"), "specials") if grouped else root
            _tag(parent.add_heading(2, SPECIALS_HEADING), "specials-heading")
            for special in self.record.specials:
                _tag(self._render_simple_item(special, parent, pending), "special")

        self._render_numbers(root)
        return root, pending

    async def render(self, container: Optional[Container] = None) -> Container:
        for warning in validate_statblock(self.record):
            logger.debug("Statblock %r: %s", self.record.name, warning)

        root, pending = self.build(container)
        logger.debug(
            "Rendering statblock %r (%s layout, %d markup snippets)",
            self.record.name, self.layout.value, len(pending),
        )

        if self.concurrent:
            await asyncio.gather(*(self._resolve(text, target) for text, target in pending))
        else:
            for text, target in pending:
                await self._resolve(text, target)
        return root

    # ── Sections ─────────────────────────────────────────────────────

    def _render_header(self, root: Container) -> None:
        header = _tag(root.add_container("header"), "header")
        if _present(self.record.source):
            header.add_block("fl-r em", _text(self.record.source))
        header.add_heading(1, _text(self.record.name), "sc nomargin")

        if _present(self.record.blurb):
            _tag(root.add_block("em group", _text(self.record.blurb)), "blurb")

    def _has_properties(self) -> bool:
        r = self.record
        return any(v is not None for v in (r.level, r.initiative, r.vuln, r.resist))

    def _render_properties(self, parent: Container) -> None:
        r = self.record
        role = self.role_text
        if role is not None:
            line = _tag(parent.add_container(), "role")
            line.add_span(role, "em")
            if _present(r.tag):
                line.add_span(f" [{_text(r.tag)}]", "sc")

        if r.initiative is not None:
            _tag(parent.add_block(text=f"Initiative: {bonus(r.initiative)}"), "initiative")
        if r.vuln is not None:
            _tag(parent.add_block(text=f"Vulnerability: {_text(r.vuln)}"), "vuln")
        if r.resist is not None:
            _tag(parent.add_block(text=f"Resistance: {_text(r.resist)}"), "resist")

    def _render_attack(self, attack: Attack, parent: Container, pending: List[_Pending]) -> Container:
        attack_el = _tag(parent.add_container("attack"), "attack")
        if _present(attack.tag):
            attack_el.add_span(f"[{_text(attack.tag)}] ", "em")
        attack_el.add_span(attack_title(attack), "bold")
        attack_el.add_span(f" — {_text(attack.hit)}")

        if attack.extras:
            extras = attack_el.add_container("extras")
            for extra in attack.extras:
                self._render_simple_item(extra, extras, pending)
        return attack_el

    def _render_simple_item(self, item: SimpleItem, parent: Container, pending: List[_Pending]) -> Container:
        el = parent.add_container("simple-item")
        text = simple_item_markup(item)
        add_markup = getattr(el, "add_markup", None)
        target = add_markup(text) if add_markup is not None else el
        pending.append((text, target))
        return el

    def _render_numbers(self, root: Container) -> None:
        r = self.record
        numbers = _tag(root.add_container("numbers"), "numbers")
        defenses = numbers.add_container("defenses")
        defenses.add_block("bold", _labelled("AC", r.ac))
        defenses.add_block(text=_labelled("PD", r.pd))
        defenses.add_block(text=_labelled("MD", r.md))
        numbers.add_block("bold", _labelled("HP", r.hp))
        numbers.add_block()

    # ── Markup ───────────────────────────────────────────────────────

    async def _resolve(self, text: str, target: Container) -> None:
        await self.resolver.resolve(text, target, self.source_path)
        if isinstance(target, Block):
            target.resolved = True


def attack_title(attack: Attack) -> str:
    """'R: Longbow +7 vs. AC (one nearby enemy)'"""
    parts = [
        AttackType.parse(attack.type).marker,
        _text(attack.name),
        _text(attack.attack),
        f"({_text(attack.detail)})" if _present(attack.detail) else "",
    ]
    return " ".join(part for part in parts if part).strip()


def simple_item_markup(item: SimpleItem) -> str:
    return f"_{_text(item.name)}:_ {_text(item.description)}"


async def render_statblock(record, resolver: Optional[MarkupResolver] = None, **kwargs) -> Container:
    return await StatblockFormatter(record, resolver=resolver, **kwargs).render()


def render_statblock_sync(record, resolver: Optional[MarkupResolver] = None, **kwargs) -> Container:
    """Blocking wrapper for callers without an event loop (Qt widgets, scripts)."""
    return asyncio.run(render_statblock(record, resolver=resolver, **kwargs))
