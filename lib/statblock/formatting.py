# statblock/formatting.py
"""Text helpers shared by the formatter: ordinals, signed bonuses, role line."""
from __future__ import annotations

import math
from typing import Any, Optional

# ── Ordinals ────────────────────────────────────────────────────────

_SUFFIXES = {
    "one": "st",
    "two": "nd",
    "few": "rd",
    "other": "th",
}


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def ordinal_category(n: Any) -> str:
    """English ordinal plural category: 'one', 'two', 'few' or 'other'.

    1, 21, 101 → one; 2, 22 → two; 3, 23 → few; 11–13 and the rest → other.
    """
    number = _as_number(n)
    if number is None or not math.isfinite(number) or number != int(number):
        return "other"
    number = abs(int(number))
    if number % 10 == 1 and number % 100 != 11:
        return "one"
    if number % 10 == 2 and number % 100 != 12:
        return "two"
    if number % 10 == 3 and number % 100 != 13:
        return "few"
    return "other"


def ordinal_suffix(n: Any) -> str:
    return _SUFFIXES[ordinal_category(n)]


def ordinal(n: Any) -> str:
    """'4' → '4th', 22 → '22nd'. The numeral itself is kept as given."""
    return f"{n}{ordinal_suffix(n)}"


# ── Signed numbers ──────────────────────────────────────────────────

def bonus(stat: Any) -> str:
    """Format a modifier with an explicit sign: 3 → '+3', -2 → '-2', 0 → '0'.

    Pre-formatted strings such as '+5' keep a single sign. Anything that is
    not a number is returned as text unchanged.
    """
    value = _as_number(stat)
    if value is None:
        return "" if stat is None else str(stat)
    if value == 0:
        return "0"
    text = str(stat).strip()
    if value > 0:
        return f"+{text.lstrip('+')}"
    return text


# ── Role line ───────────────────────────────────────────────────────

def capitalize(text: str) -> str:
    lower = text.lower()
    return lower[:1].upper() + lower[1:]


def role_text(size: Any, level: Any, role: Any) -> Optional[str]:
    """'large', 4, 'troop' → 'Large 4th level troop'. None without a level."""
    if level is None:
        return None
    parts = [size, f"{ordinal(level)} level", role]
    joined = " ".join(str(part) for part in parts if part is not None)
    return capitalize(" ".join(joined.split()))
