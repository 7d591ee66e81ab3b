from statblock.blocks import Block, Container
from statblock.config import Layout
from statblock.formatter import (
    StatblockFormatter,
    render_statblock,
    render_statblock_sync,
)
from statblock.formatting import bonus, capitalize, ordinal, ordinal_suffix
from statblock.html_export import to_html
from statblock.markup import MarkdownResolver, MarkupResolver
from statblock.record import (
    Attack,
    AttackType,
    Extra,
    SimpleItem,
    StatblockRecord,
    validate_statblock,
)

__all__ = [
    "Attack",
    "AttackType",
    "Block",
    "Container",
    "Extra",
    "Layout",
    "MarkdownResolver",
    "MarkupResolver",
    "SimpleItem",
    "StatblockFormatter",
    "StatblockRecord",
    "bonus",
    "capitalize",
    "ordinal",
    "ordinal_suffix",
    "render_statblock",
    "render_statblock_sync",
    "to_html",
    "validate_statblock",
]
