# statblock/record.py
"""
Immutable statblock records.

Input arrives as a loose mapping (usually straight out of a YAML/JSON code
block). `StatblockRecord.from_dict` copies what it understands into frozen
dataclasses and never rejects a value for being the wrong type; conversion
to display text happens in the formatter.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Tuple

from statblock.exceptions import StatblockTypeError


class AttackType(Enum):
    MELEE = "melee"
    RANGED = "ranged"
    CLOSE = "close"

    def __repr__(self) -> str:
        return str(self.name)

    @classmethod
    def parse(cls, value: Any) -> AttackType:
        """Unknown or missing types are treated as melee."""
        if isinstance(value, AttackType):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.MELEE

    @property
    def marker(self) -> str:
        return _RANGE_MARKERS[self]


_RANGE_MARKERS = {
    AttackType.MELEE: "",
    AttackType.RANGED: "R:",
    AttackType.CLOSE: "C:",
}


@dataclass(frozen=True)
class SimpleItem:
    name: Any = None
    description: Any = None

    @staticmethod
    def from_dict(data: Any) -> SimpleItem:
        if isinstance(data, Mapping):
            return SimpleItem(name=data.get("name"), description=data.get("description"))
        # A bare string in a list of traits is just a name
        return SimpleItem(name=data)


# Extras hang off an attack but render exactly like traits
Extra = SimpleItem


@dataclass(frozen=True)
class Attack:
    name: Any = None
    attack: Any = None
    type: AttackType = AttackType.MELEE
    tag: Any = None
    detail: Any = None
    hit: Any = None
    extras: Tuple[SimpleItem, ...] = ()

    @staticmethod
    def from_dict(data: Any) -> Attack:
        if not isinstance(data, Mapping):
            return Attack(name=data)
        return Attack(
            name=data.get("name"),
            attack=data.get("attack"),
            type=AttackType.parse(data.get("type")),
            tag=data.get("tag"),
            detail=data.get("detail"),
            hit=data.get("hit"),
            extras=_collect(data.get("extras"), SimpleItem.from_dict),
        )


@dataclass(frozen=True)
class StatblockRecord:
    name: Any = None
    source: Any = None
    blurb: Any = None

    size: Any = None
    level: Any = None
    role: Any = None
    tag: Any = None

    initiative: Any = None
    vuln: Any = None
    resist: Any = None
    ac: Any = None
    pd: Any = None
    md: Any = None
    hp: Any = None

    attacks: Tuple[Attack, ...] = field(default_factory=tuple)
    traits: Tuple[SimpleItem, ...] = field(default_factory=tuple)
    specials: Tuple[SimpleItem, ...] = field(default_factory=tuple)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> StatblockRecord:
        if isinstance(data, StatblockRecord):
            return data
        if not isinstance(data, Mapping):
            raise StatblockTypeError(
                f"Statblock must be a mapping, got {type(data).__name__}"
            )
        return StatblockRecord(
            name=data.get("name"),
            source=data.get("source"),
            blurb=data.get("blurb"),
            size=data.get("size"),
            level=data.get("level"),
            role=data.get("role"),
            tag=data.get("tag"),
            initiative=data.get("initiative"),
            vuln=data.get("vuln"),
            resist=data.get("resist"),
            ac=data.get("ac"),
            pd=data.get("pd"),
            md=data.get("md"),
            hp=data.get("hp"),
            attacks=_collect(data.get("attacks"), Attack.from_dict),
            traits=_collect(data.get("traits"), SimpleItem.from_dict),
            specials=_collect(data.get("specials"), SimpleItem.from_dict),
        )


def _collect(entries: Optional[Iterable[Any]], build) -> tuple:
    if not entries:
        return ()
    # A lone scalar or mapping stands for a one-entry collection
    if isinstance(entries, (str, Mapping)) or not isinstance(entries, Iterable):
        entries = [entries]
    return tuple(build(entry) for entry in entries if entry is not None)


# ── Validation ──────────────────────────────────────────────────────

_REQUIRED_FIELDS = ["name", "ac", "pd", "md", "hp"]


def validate_statblock(record: StatblockRecord) -> list[str]:
    """Return list of warning strings for missing or suspect fields.

    Rendering never depends on this; a statblock with warnings still renders
    with empty values in place of the missing ones.
    """
    warnings = []

    for name in _REQUIRED_FIELDS:
        value = getattr(record, name)
        if value is None or value == "":
            warnings.append(f"Missing required field: {name}")

    level = record.level
    if level is not None and not isinstance(level, bool):
        try:
            if int(level) < 0:
                warnings.append(f"Level is negative: {level}")
        except (TypeError, ValueError):
            warnings.append(f"Level is not a number: {level!r}")

    for i, attack in enumerate(record.attacks):
        if not attack.name:
            warnings.append(f"Attack #{i + 1} has no name")

    return warnings
