"""
Quick preview script for statblocks. Run with:

    python preview_statblock.py [fixture_name] [--layout flat|grouped] [--html] [--remember]

fixture_name defaults to 'bugbear_shaman'. Other options:
    orc_brute

--html       print the rendered HTML fragment instead of opening a window
--remember   store the chosen --layout in ~/.statblock13a_config/settings.json
"""
import argparse
import json
import os
import sys

# Add lib to path so imports work without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "lib"))

from statblock.config import Layout, save_settings
from statblock.formatter import render_statblock_sync
from statblock.html_export import to_html

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "tests", "fixtures")


def load_fixture(fixture: str) -> dict:
    fixture_path = os.path.join(FIXTURES_DIR, f"{fixture}.json")
    if not os.path.exists(fixture_path):
        print(f"Fixture not found: {fixture_path}")
        print("Available:", [f[:-5] for f in os.listdir(FIXTURES_DIR) if f.endswith(".json")])
        sys.exit(1)

    with open(fixture_path, encoding="utf-8") as f:
        return json.load(f)


def preview_widget(data: dict, layout):
    # Qt imports stay here so --html works on headless machines
    from PyQt5.QtWidgets import QMainWindow, QSizePolicy
    from statblock_ui.statblock_widget import StatblockWidget

    window = QMainWindow()
    window.setWindowTitle(f"Statblock Preview — {data.get('name', 'unnamed')}")
    window.resize(420, 700)

    widget = StatblockWidget(layout=layout)
    widget.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
    widget.load_statblock(data)
    window.setCentralWidget(widget)
    window.show()
    return window


def main():
    parser = argparse.ArgumentParser(description="Preview a statblock fixture.")
    parser.add_argument("fixture", nargs="?", default="bugbear_shaman")
    parser.add_argument("--layout", choices=[layout.value for layout in Layout], default=None)
    parser.add_argument("--html", action="store_true")
    parser.add_argument("--remember", action="store_true")
    args = parser.parse_args()

    layout = Layout.parse(args.layout) if args.layout else None
    if args.remember and layout is not None:
        save_settings(layout=layout)
        print(f"[Preview] Saved default layout: {layout.value}")

    data = load_fixture(args.fixture)

    if args.html:
        print(to_html(render_statblock_sync(data, layout=layout)))
        return

    import qdarktheme
    from PyQt5.QtWidgets import QApplication

    qdarktheme.enable_hi_dpi()
    app = QApplication(sys.argv)
    qdarktheme.setup_theme("auto")
    window = preview_widget(data, layout)  # keep reference alive for event loop
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
