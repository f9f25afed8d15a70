"""
Unit tables for gas and NEAR amounts.

Every accepted spelling of a unit is listed explicitly. Matching is
case-insensitive, so "TGAS", "tgas" and "TGas" resolve to the same entry.
The micro sign (U+00B5) matches the Greek mu (U+03BC) under re.IGNORECASE,
so "µNEAR" needs no separate spelling.

Scales are relative to the kind's base unit:
    GAS   base unit = 1 gas
    NEAR  base unit = 1 yoctoNEAR (10^-24 NEAR)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import InvalidFormat, UnknownUnit
from .models import QuantityKind

# ─── Scale Factors ───────────────────────────────────────────────────

GAS_UNITS: dict[str, int] = {
    "TGAS": 10**12,
    "GGAS": 10**9,
}

NEAR_UNITS: dict[str, int] = {
    "NEAR": 10**24,
    "MILLI_NEAR": 10**21,
    "MICRO_NEAR": 10**18,
}


# ─── Data Structures ────────────────────────────────────────────────


@dataclass(frozen=True)
class UnitEntry:
    """One unit tier of a quantity kind."""

    kind: QuantityKind
    name: str  # Display suffix, e.g. "TGas"
    spellings: tuple[str, ...]  # Every accepted spelling, including `name`
    scale: int  # Multiplier to the kind's base unit


class GasTier(str, Enum):
    TGAS = "TGas"
    GGAS = "GGas"
    GAS = "Gas"


class NearTier(str, Enum):
    NEAR = "NEAR"
    MILLI = "mNEAR"
    MICRO = "μNEAR"
    YOCTO = "yocto"


Tier = Union[GasTier, NearTier]


# ─── Tables (largest tier first) ─────────────────────────────────────

_GAS_TABLE: tuple[UnitEntry, ...] = (
    UnitEntry(QuantityKind.GAS, "TGas", ("TGas",), GAS_UNITS["TGAS"]),
    UnitEntry(QuantityKind.GAS, "GGas", ("GGas",), GAS_UNITS["GGAS"]),
    UnitEntry(QuantityKind.GAS, "Gas", ("Gas",), 1),
)

_NEAR_TABLE: tuple[UnitEntry, ...] = (
    UnitEntry(QuantityKind.NEAR, "NEAR", ("NEAR",), NEAR_UNITS["NEAR"]),
    UnitEntry(
        QuantityKind.NEAR, "mNEAR", ("mNEAR", "milliNEAR"), NEAR_UNITS["MILLI_NEAR"]
    ),
    UnitEntry(
        QuantityKind.NEAR,
        "μNEAR",
        ("μNEAR", "microNEAR"),
        NEAR_UNITS["MICRO_NEAR"],
    ),
    UnitEntry(QuantityKind.NEAR, "yocto", ("yoctoNEAR", "yocto"), 1),
)

_TABLES: dict[QuantityKind, tuple[UnitEntry, ...]] = {
    QuantityKind.GAS: _GAS_TABLE,
    QuantityKind.NEAR: _NEAR_TABLE,
}

_TIERS: dict[Tier, UnitEntry] = {
    GasTier.TGAS: _GAS_TABLE[0],
    GasTier.GGAS: _GAS_TABLE[1],
    GasTier.GAS: _GAS_TABLE[2],
    NearTier.NEAR: _NEAR_TABLE[0],
    NearTier.MILLI: _NEAR_TABLE[1],
    NearTier.MICRO: _NEAR_TABLE[2],
    NearTier.YOCTO: _NEAR_TABLE[3],
}


def _check_unique(table: tuple[UnitEntry, ...]) -> None:
    seen: set[str] = set()
    for entry in table:
        for spelling in entry.spellings:
            key = spelling.casefold()
            if key in seen:
                raise ValueError(f"Duplicate unit spelling {spelling!r} for {entry.kind.value}")
            seen.add(key)


for _table in _TABLES.values():
    _check_unique(_table)

# Same case-insensitive matching rules as the parser's grammar, so any suffix
# the grammar accepts resolves here
_MATCHERS: dict[QuantityKind, tuple[tuple[re.Pattern[str], UnitEntry], ...]] = {
    kind: tuple(
        (re.compile("|".join(re.escape(s) for s in entry.spellings), re.IGNORECASE), entry)
        for entry in table
    )
    for kind, table in _TABLES.items()
}


# ─── Public API ──────────────────────────────────────────────────────


def unit_table(kind: QuantityKind) -> tuple[UnitEntry, ...]:
    """All unit tiers of ``kind``, largest scale first."""
    return _TABLES[kind]


def supported_units(kind: QuantityKind) -> list[str]:
    """Human-readable list of units, e.g. ["NEAR", "mNEAR/milliNEAR", ...]."""
    return ["/".join(entry.spellings) for entry in _TABLES[kind]]


def resolve_unit(kind: QuantityKind, suffix: str) -> UnitEntry:
    """Map a unit suffix to its table entry (case-insensitive).

    Raises:
        UnknownUnit: If ``suffix`` is not a spelling of any unit of ``kind``.
    """
    for matcher, entry in _MATCHERS[kind]:
        if matcher.fullmatch(suffix):
            return entry

    supported = supported_units(kind)
    raise UnknownUnit(
        f"Unknown {kind_label(kind)} unit. Supported: {', '.join(supported)}",
        details={"kind": kind.value, "unit": suffix, "supported": supported},
    )


def tier_unit(tier: Tier) -> UnitEntry:
    """The table entry behind a named tier."""
    return _TIERS[tier]


def suffix_pattern(kind: QuantityKind) -> str:
    """Regex alternation of every accepted spelling, longest first."""
    spellings = sorted(
        (s for entry in _TABLES[kind] for s in entry.spellings),
        key=len,
        reverse=True,
    )
    return "|".join(re.escape(s) for s in spellings)


def kind_label(kind: QuantityKind) -> str:
    return "gas" if kind == QuantityKind.GAS else "NEAR"


def ensure_kind(kind: QuantityKind, value: object) -> None:
    """Reject a validated amount of the other kind; untagged ints pass.

    Raises:
        InvalidFormat: If ``value`` is a ``ValidatedGas`` where NEAR is
            expected, or the reverse.
    """
    other = getattr(value, "kind", kind)
    if other != kind:
        raise InvalidFormat(
            f"Expected a {kind_label(kind)} amount, got a validated "
            f"{kind_label(other)} amount ({int(value)}).",
            details={"kind": kind.value, "got": other.value, "value": int(value)},
        )
