"""
Plausibility checks for raw base-unit integers.

A raw integer carries no unit, so a caller who writes ``30`` for a gas limit
almost certainly meant 30 TGas. These checks only advise: they log a warning
and return a finding, but never reject or alter the value. String inputs are
never checked because their unit is explicit.
"""

from __future__ import annotations

import logging

from .config import Settings, get_settings
from .models import QuantityKind, Severity, ValidationFinding

logger = logging.getLogger(__name__)


def check_plausible(
    kind: QuantityKind, raw_value: int, settings: Settings | None = None
) -> ValidationFinding | None:
    """Warn when a raw base-unit value looks like a unit mix-up.

    Returns:
        A WARNING finding if the value is suspiciously small, else None.
    """
    if settings is None:
        settings = get_settings()
    if not settings.plausibility_warnings:
        return None

    if kind == QuantityKind.GAS:
        return _check_gas(raw_value, settings.gas_warn_threshold)
    return _check_near(raw_value, settings.near_warn_threshold)


def _check_gas(raw_value: int, threshold: int) -> ValidationFinding | None:
    if raw_value >= threshold:
        return None

    message = f'Gas limit {raw_value} seems very small. Did you mean "{raw_value} TGas"?'
    logger.warning(message)
    return ValidationFinding(
        severity=Severity.WARNING,
        code="GAS_SUSPICIOUSLY_SMALL",
        field="gas",
        message=message,
        details={"value": raw_value, "threshold": threshold, "suggestion": f"{raw_value} TGas"},
    )


def _check_near(raw_value: int, threshold: int) -> ValidationFinding | None:
    if raw_value >= threshold:
        return None

    message = (
        f"NEAR amount {raw_value} yoctoNEAR seems very small. "
        f"Did you mean a larger unit?"
    )
    logger.warning(message)
    return ValidationFinding(
        severity=Severity.WARNING,
        code="NEAR_SUSPICIOUSLY_SMALL",
        field="near",
        message=message,
        details={"value": raw_value, "threshold": threshold},
    )
