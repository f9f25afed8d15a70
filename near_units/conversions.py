"""
Conversions between canonical base units and human-scale tiers.

    to_tier      base units  → float in a tier   (10**21 yocto → 1.0 mNEAR)
    from_tier    float tier  → base units        (0.5 NEAR → 5 * 10**23 yocto)
    format_*     base units  → "25 TGas", "500 mNEAR", "100 yocto"

``from_tier`` scales exactly the way the parser does, so
``from_tier(kind, n, tier) == parse_quantity(kind, f"{n} {tier.value}")``.
"""

from __future__ import annotations

import math

from .exceptions import InvalidFormat
from .models import QuantityKind, Validated, ValidatedGas, ValidatedNear, wrap
from .units import GasTier, NearTier, Tier, ensure_kind, tier_unit, unit_table


# ─── Generic Conversions ─────────────────────────────────────────────


def to_tier(kind: QuantityKind, value: int, tier: Tier) -> float:
    """Express a base-unit amount in ``tier`` (true division, correctly rounded).

    Amounts too large for a float come back as ``math.inf``.

    Raises:
        InvalidFormat: If ``value`` is a validated amount of the other kind.
    """
    unit = _unit_for(kind, tier)
    ensure_kind(kind, value)
    return _divide(value, unit.scale)


def from_tier(kind: QuantityKind, amount: float, tier: Tier) -> Validated:
    """Convert an amount in ``tier`` to base units, truncating toward zero.

    Raises:
        InvalidFormat: If ``amount`` is negative, NaN or infinite.
    """
    unit = _unit_for(kind, tier)
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidFormat(
            f"Amount must be a number, got {type(amount).__name__}",
            details={"kind": kind.value, "tier": unit.name},
        )
    if isinstance(amount, float) and not math.isfinite(amount):
        raise InvalidFormat(
            f"Amount must be finite, got {amount}",
            details={"kind": kind.value, "tier": unit.name},
        )
    if amount < 0:
        raise InvalidFormat(
            f"Amount must be non-negative, got {amount} {unit.name}",
            details={"kind": kind.value, "tier": unit.name, "amount": amount},
        )

    if isinstance(amount, int) or amount.is_integer():
        return wrap(kind, int(amount) * unit.scale)
    return wrap(kind, math.floor(amount * float(unit.scale)))


def format_quantity(kind: QuantityKind, value: int) -> str:
    """Render ``value`` in the largest tier where it is at least 1.

    Falls back to the raw base-unit integer ("1000 Gas", "100 yocto").

    Raises:
        InvalidFormat: If ``value`` is a validated amount of the other kind.
    """
    ensure_kind(kind, value)
    table = unit_table(kind)
    for unit in table[:-1]:
        scaled = _divide(value, unit.scale)
        if scaled >= 1:
            return f"{_format_number(scaled)} {unit.name}"
    return f"{int(value)} {table[-1].name}"


def _unit_for(kind: QuantityKind, tier: Tier):
    unit = tier_unit(tier)
    if unit.kind != kind:
        raise ValueError(f"Tier {tier.value} is not a {kind.value} tier")
    return unit


def _require_int(kind: QuantityKind, amount: object) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidFormat(
            f"Base-unit amounts must be integers, got {amount!r}",
            details={"kind": kind.value, "amount": repr(amount)},
        )
    ensure_kind(kind, amount)


def _divide(value: int, scale: int) -> float:
    try:
        return int(value) / scale
    except OverflowError:
        return math.inf


def _format_number(value: float) -> str:
    """Drop the trailing ".0" of integral floats: 25.0 → "25", 25.5 → "25.5"."""
    if math.isinf(value):
        return "Infinity"
    if value.is_integer() and value < 1e21:
        return str(int(value))
    return repr(value)


# ─── Gas Helpers ─────────────────────────────────────────────────────


def tgas(amount: float) -> ValidatedGas:
    return from_tier(QuantityKind.GAS, amount, GasTier.TGAS)  # type: ignore[return-value]


def ggas(amount: float) -> ValidatedGas:
    return from_tier(QuantityKind.GAS, amount, GasTier.GGAS)  # type: ignore[return-value]


def raw_gas(amount: int) -> ValidatedGas:
    """Tag an integer already in gas units (no plausibility check)."""
    _require_int(QuantityKind.GAS, amount)
    return from_tier(QuantityKind.GAS, amount, GasTier.GAS)  # type: ignore[return-value]


def to_tgas(value: int) -> float:
    return to_tier(QuantityKind.GAS, value, GasTier.TGAS)


def to_ggas(value: int) -> float:
    return to_tier(QuantityKind.GAS, value, GasTier.GGAS)


from_tgas = tgas
from_ggas = ggas


def format_gas(value: int) -> str:
    """e.g. 25 * 10**12 → "25 TGas", 1000 → "1000 Gas"."""
    return format_quantity(QuantityKind.GAS, value)


# ─── NEAR Helpers ────────────────────────────────────────────────────


def near(amount: float) -> ValidatedNear:
    return from_tier(QuantityKind.NEAR, amount, NearTier.NEAR)  # type: ignore[return-value]


def milli_near(amount: float) -> ValidatedNear:
    return from_tier(QuantityKind.NEAR, amount, NearTier.MILLI)  # type: ignore[return-value]


def micro_near(amount: float) -> ValidatedNear:
    return from_tier(QuantityKind.NEAR, amount, NearTier.MICRO)  # type: ignore[return-value]


def yocto(amount: int) -> ValidatedNear:
    """Tag an integer already in yoctoNEAR (no plausibility check)."""
    _require_int(QuantityKind.NEAR, amount)
    return from_tier(QuantityKind.NEAR, amount, NearTier.YOCTO)  # type: ignore[return-value]


def to_near(value: int) -> float:
    return to_tier(QuantityKind.NEAR, value, NearTier.NEAR)


def to_milli_near(value: int) -> float:
    return to_tier(QuantityKind.NEAR, value, NearTier.MILLI)


def to_micro_near(value: int) -> float:
    return to_tier(QuantityKind.NEAR, value, NearTier.MICRO)


from_near = near
from_milli_near = milli_near
from_micro_near = micro_near


def format_near(value: int) -> str:
    """e.g. 10**24 → "1 NEAR", 500 * 10**21 → "500 mNEAR", 100 → "100 yocto"."""
    return format_quantity(QuantityKind.NEAR, value)
