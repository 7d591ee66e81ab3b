"""Tests for lib/statblock/config.py"""

import json
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "lib"))

from statblock import config
from statblock.config import Layout
from statblock.exceptions import UnknownLayoutError
from statblock.formatter import StatblockFormatter


@pytest.fixture
def settings_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "CONFIG_DIR", str(tmp_path / "cfg"))
    monkeypatch.setattr(config, "SETTINGS_PATH", str(tmp_path / "cfg" / "settings.json"))
    for var in ("STATBLOCK_LAYOUT", "STATBLOCK_CONCURRENT", "STATBLOCK_MARKDOWN_EXTENSIONS"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path / "cfg"


class TestLayout:
    def test_default_is_flat(self, settings_dir):
        assert config.get_layout() is Layout.FLAT

    def test_env_fallback(self, settings_dir, monkeypatch):
        monkeypatch.setenv("STATBLOCK_LAYOUT", "Grouped")
        assert config.get_layout() is Layout.GROUPED

    def test_settings_file_wins_over_env(self, settings_dir, monkeypatch):
        monkeypatch.setenv("STATBLOCK_LAYOUT", "grouped")
        config.save_settings(layout=Layout.FLAT)
        assert config.get_layout() is Layout.FLAT

    def test_unknown_layout(self, settings_dir, monkeypatch):
        monkeypatch.setenv("STATBLOCK_LAYOUT", "sideways")
        with pytest.raises(UnknownLayoutError):
            config.get_layout()

    def test_unknown_layout_in_formatter(self):
        with pytest.raises(UnknownLayoutError):
            StatblockFormatter({"name": "Rat"}, layout="sideways")

    def test_formatter_uses_configured_layout(self, settings_dir, monkeypatch):
        monkeypatch.setenv("STATBLOCK_LAYOUT", "grouped")
        assert StatblockFormatter({"name": "Rat"}).layout is Layout.GROUPED


class TestOtherSettings:
    def test_concurrent(self, settings_dir, monkeypatch):
        assert config.get_concurrent() is False
        monkeypatch.setenv("STATBLOCK_CONCURRENT", "yes")
        assert config.get_concurrent() is True

    def test_corrupt_settings_file_ignored(self, settings_dir, monkeypatch):
        settings_dir.mkdir()
        (settings_dir / "settings.json").write_text("{not json")
        monkeypatch.setenv("STATBLOCK_LAYOUT", "grouped")

        assert config.get_layout() is Layout.GROUPED
        assert config.get_concurrent() is False

    def test_markdown_extensions_default(self, settings_dir):
        assert config.get_markdown_extensions() == config.DEFAULT_MARKDOWN_EXTENSIONS

    def test_save_settings_merges(self, settings_dir):
        config.save_settings(layout=Layout.GROUPED)
        config.save_settings(concurrent=True, markdown_extensions=["tables"])

        with open(settings_dir / "settings.json") as f:
            saved = json.load(f)
        assert saved == {"layout": "grouped", "concurrent": True, "markdown_extensions": ["tables"]}
        assert config.get_concurrent() is True
        assert config.get_markdown_extensions() == ["tables"]
