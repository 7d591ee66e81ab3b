# statblock_ui/statblock_widget.py
"""
StatblockWidget — QTextBrowser subclass that renders a 13th Age statblock.

The statblock goes through the same formatter as everywhere else; the widget
only serialises the resulting block tree to HTML and styles the class names
the formatter emits.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from PyQt5.QtWidgets import QTextBrowser

from statblock.config import Layout
from statblock.formatter import render_statblock_sync
from statblock.html_export import to_html
from statblock.markup import MarkdownResolver, MarkupResolver
from statblock.record import StatblockRecord


# ── Colours ─────────────────────────────────────────────────────────

_BG     = "#FEF5E5"   # warm parchment
_MAROON = "#58180D"   # name, headings
_ORANGE = "#C9801A"   # rules under the name and the numbers block
_TEXT   = "#1a1a1a"

# Qt rich text understands a CSS subset; keep to it
_STYLESHEET = f"""
body {{ background-color:{_BG}; color:{_TEXT};
        font-family:"Palatino Linotype",Palatino,serif; font-size:13px; }}
h1 {{ font-size:22px; color:{_MAROON}; margin:0; }}
h2 {{ font-size:15px; color:{_MAROON}; margin:8px 0 2px 0; }}
.fl-r {{ float:right; }}
.em {{ font-style:italic; }}
.sc {{ font-variant:small-caps; }}
.bold {{ font-weight:bold; }}
.group {{ margin:4px 0; }}
.attack {{ margin:3px 0; }}
.extras {{ margin-left:12px; }}
.simple-item {{ margin:3px 0; }}
.numbers {{ border-top:2px solid {_ORANGE}; margin-top:6px; padding-top:4px; }}
"""


# ── Widget ──────────────────────────────────────────────────────────

class StatblockWidget(QTextBrowser):
    def __init__(
        self,
        parent=None,
        resolver: Optional[MarkupResolver] = None,
        layout: Union[Layout, str, None] = None,
    ):
        super().__init__(parent)
        self.setOpenExternalLinks(True)
        self.resolver = resolver or MarkdownResolver()
        self.statblock_layout = layout
        self.clear_statblock()

    # ── Public API ───────────────────────────────────────────────────

    def load_statblock(self, data: Union[StatblockRecord, Mapping[str, Any]]) -> None:
        """Render a statblock record or dict and display it."""
        self.setHtml(self.build_html(data))

    def clear_statblock(self) -> None:
        """Show an empty placeholder state."""
        self.setHtml(
            f'<body style="background-color:{_BG}; color:#999; '
            f'font-family:&quot;Palatino Linotype&quot;,Palatino,serif;">'
            f'<p style="margin:20px; text-align:center; font-style:italic;">'
            f'No statblock loaded.</p></body>'
        )

    # ── HTML builder ─────────────────────────────────────────────────

    def build_html(self, data: Union[StatblockRecord, Mapping[str, Any]]) -> str:
        root = render_statblock_sync(data, resolver=self.resolver, layout=self.statblock_layout)
        return (
            f"<html><head><style>{_STYLESHEET}</style></head>"
            f"<body>{to_html(root)}</body></html>"
        )
