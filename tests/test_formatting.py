"""Tests for lib/statblock/formatting.py"""

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "lib"))

from statblock.formatting import (
    bonus,
    capitalize,
    ordinal,
    ordinal_category,
    ordinal_suffix,
    role_text,
)


# ── Ordinals ────────────────────────────────────────────────────────

class TestOrdinal:
    @pytest.mark.parametrize(
        "n, expected",
        [
            (0, "0th"),
            (1, "1st"),
            (2, "2nd"),
            (3, "3rd"),
            (4, "4th"),
            (11, "11th"),
            (12, "12th"),
            (13, "13th"),
            (21, "21st"),
            (22, "22nd"),
            (23, "23rd"),
            (101, "101st"),
            (111, "111th"),
            (112, "112th"),
        ],
    )
    def test_suffix(self, n, expected):
        assert ordinal(n) == expected

    def test_categories(self):
        assert ordinal_category(1) == "one"
        assert ordinal_category(2) == "two"
        assert ordinal_category(3) == "few"
        assert ordinal_category(11) == "other"
        assert ordinal_category(14) == "other"

    def test_numeric_string(self):
        assert ordinal("2") == "2nd"

    def test_not_a_number_takes_th(self):
        assert ordinal_suffix("epic") == "th"
        assert ordinal_suffix(2.5) == "th"


# ── bonus ───────────────────────────────────────────────────────────

class TestBonus:
    def test_zero_has_no_sign(self):
        assert bonus(0) == "0"

    def test_positive(self):
        assert bonus(3) == "+3"

    def test_negative(self):
        assert bonus(-2) == "-2"

    def test_numeric_strings(self):
        assert bonus("5") == "+5"
        assert bonus("-1") == "-1"
        assert bonus("0") == "0"

    def test_preformatted_plus_not_doubled(self):
        assert bonus("+7") == "+7"

    def test_non_numeric_verbatim(self):
        assert bonus("special") == "special"


# ── capitalize / role text ──────────────────────────────────────────

class TestRoleText:
    def test_capitalize(self):
        assert capitalize("elite mage") == "Elite mage"
        assert capitalize("ELITE MAGE") == "Elite mage"

    def test_capitalize_empty(self):
        assert capitalize("") == ""

    def test_full(self):
        assert role_text("large", 4, "troop") == "Large 4th level troop"

    def test_no_level(self):
        assert role_text("large", None, "troop") is None

    def test_level_only(self):
        assert role_text(None, 1, None) == "1st level"

    def test_missing_size_leaves_no_leading_space(self):
        assert role_text(None, 2, "Wrecker") == "2nd level wrecker"

    def test_redundant_whitespace_removed(self):
        assert role_text(" huge ", 12, "  spoiler") == "Huge 12th level spoiler"
