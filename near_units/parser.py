"""
Quantity parser: "<number> <unit>" strings or raw integers → base units.

Grammar (whole string, suffix case-insensitive):

    <digits>[.<digits>] <zero or more spaces> <unit suffix>

No sign, no exponent, no thousands separators. Integer-valued amounts
("25 TGas", "1.000 NEAR") scale with exact integer arithmetic. Fractional
amounts are multiplied as floats and truncated toward zero, which loses
precision past 2^53 for very large amounts at the NEAR/mNEAR scales; the
truncation is kept as-is so that results match ``conversions.from_tier``.

Raw integers are already in base units. They pass through unchanged after an
advisory plausibility check.
"""

from __future__ import annotations

import logging
import math
import re

from .exceptions import InvalidFormat, QuantityError
from .models import (
    ParseOutcome,
    QuantityKind,
    Validated,
    ValidatedGas,
    ValidatedNear,
    ValidationFinding,
    wrap,
)
from .plausibility import check_plausible
from .units import ensure_kind, kind_label, resolve_unit, suffix_pattern

logger = logging.getLogger(__name__)

FORMAT_EXAMPLES: dict[QuantityKind, list[str]] = {
    QuantityKind.GAS: ["25.5 TGas", "300 GGas", "1000 Gas"],
    QuantityKind.NEAR: ["0.01 NEAR", "500 mNEAR", "1000 μNEAR", "100 yocto"],
}

# ASCII digits only: \d would also accept other scripts' digits
_PATTERNS: dict[QuantityKind, re.Pattern[str]] = {
    kind: re.compile(
        rf"([0-9]+(?:\.[0-9]+)?)\s*({suffix_pattern(kind)})", re.IGNORECASE
    )
    for kind in QuantityKind
}


# ─── Public API ──────────────────────────────────────────────────────


def parse_quantity(kind: QuantityKind, value: object) -> Validated:
    """Parse a string or raw integer into canonical base units.

    Raises:
        InvalidFormat: If the input does not have the expected shape.
        UnknownUnit: If the unit suffix is not in the kind's table.
    """
    result, _ = _parse(kind, value)
    return result


def parse_gas(value: object) -> ValidatedGas:
    """Parse a gas amount, e.g. "25.5 TGas" → 25_500_000_000_000."""
    return parse_quantity(QuantityKind.GAS, value)  # type: ignore[return-value]


def parse_near(value: object) -> ValidatedNear:
    """Parse a NEAR amount, e.g. "500 mNEAR" → 500 * 10**21 yoctoNEAR."""
    return parse_quantity(QuantityKind.NEAR, value)  # type: ignore[return-value]


def safe_parse(kind: QuantityKind, value: object, field: str | None = None) -> ParseOutcome:
    """Parse without raising for bad input.

    Errors come back as ERROR findings, plausibility warnings as WARNING
    findings, so the caller can branch on ``outcome.ok``.
    """
    field = field or kind.value.lower()
    try:
        result, warning = _parse(kind, value)
    except QuantityError as e:
        return ParseOutcome(kind=kind, findings=[e.to_finding(field)])

    findings = []
    if warning is not None:
        findings.append(warning.model_copy(update={"field": field}))
    return ParseOutcome(kind=kind, value=int(result), findings=findings)


# ─── Internal Helpers ────────────────────────────────────────────────


def _parse(kind: QuantityKind, value: object) -> tuple[Validated, ValidationFinding | None]:
    """Parse ``value`` and return it with the plausibility warning, if any."""
    if isinstance(value, str):
        return _parse_string(kind, value), None
    if isinstance(value, int) and not isinstance(value, bool):
        return _accept_raw(kind, value)
    raise InvalidFormat(
        f"Invalid {kind_label(kind)} input of type {type(value).__name__}. "
        f"Pass a string like {_examples(kind)} or an integer in base units.",
        details={"kind": kind.value, "type": type(value).__name__, "examples": FORMAT_EXAMPLES[kind]},
    )


def _parse_string(kind: QuantityKind, text: str) -> Validated:
    match = _PATTERNS[kind].fullmatch(text)
    if not match:
        raise InvalidFormat(
            f"Invalid {kind_label(kind)} format. Use format like {_examples(kind)}",
            details={"kind": kind.value, "input": text, "examples": FORMAT_EXAMPLES[kind]},
        )

    amount, suffix = match.groups()
    unit = resolve_unit(kind, suffix)
    result = wrap(kind, _scale(kind, text, amount, unit.scale))
    logger.debug("Parsed %r as %d (%s × %d)", text, result, amount, unit.scale)
    return result


def _accept_raw(kind: QuantityKind, value: int) -> tuple[Validated, ValidationFinding | None]:
    ensure_kind(kind, value)
    if value < 0:
        raise InvalidFormat(
            f"Invalid {kind_label(kind)} amount {value}: base-unit amounts cannot be negative.",
            details={"kind": kind.value, "value": value, "examples": FORMAT_EXAMPLES[kind]},
        )
    warning = check_plausible(kind, int(value))
    return wrap(kind, int(value)), warning


def _scale(kind: QuantityKind, text: str, amount: str, scale: int) -> int:
    """Scale a matched decimal string into base units, truncating toward zero."""
    whole, _, fraction = amount.partition(".")
    if not fraction.strip("0"):
        return int(whole) * scale

    product = float(amount) * float(scale)
    if not math.isfinite(product):
        raise InvalidFormat(
            f"Amount {text!r} is too large to scale into {kind_label(kind)} base units.",
            details={"kind": kind.value, "input": text, "examples": FORMAT_EXAMPLES[kind]},
        )
    return math.floor(product)


def _examples(kind: QuantityKind) -> str:
    quoted = [f'"{e}"' for e in FORMAT_EXAMPLES[kind]]
    return ", ".join(quoted[:-1]) + f", or {quoted[-1]}"
