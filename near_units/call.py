"""
Composite validation of a function call's gas limit and attached deposit.

Both fields are parsed independently by pydantic before-validators, so a call
with two bad fields reports two errors instead of stopping at the first.

Usage:
    call = validate_call("25.5 TGas", "0.01 NEAR")
    call.gas_limit         # 25_500_000_000_000
    call.attached_deposit  # 10**22

    report = check_call("25", "1 ETH")
    if not report.is_valid:
        for finding in report.errors:
            print(finding.field, finding.message)
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import InvalidFormat, QuantityError, ValidationFailed
from .models import (
    CallValidationReport,
    GasInput,
    NearInput,
    QuantityKind,
    ValidatedCall,
    ValidationFinding,
)
from .parser import parse_gas, parse_near, safe_parse

logger = logging.getLogger(__name__)


class CallFunctionParams(BaseModel):
    """Raw call parameters; validation resolves both to base units."""

    model_config = ConfigDict(frozen=True)

    gas_limit: int
    attached_deposit: int

    @field_validator("gas_limit", mode="before")
    @classmethod
    def _parse_gas_limit(cls, value: object) -> int:
        return int(parse_gas(value))

    @field_validator("attached_deposit", mode="before")
    @classmethod
    def _parse_attached_deposit(cls, value: object) -> int:
        return int(parse_near(value))


# ─── Public API ──────────────────────────────────────────────────────


def validate_call(gas_limit: GasInput, attached_deposit: NearInput) -> ValidatedCall:
    """Validate both call fields and return them in base units.

    Raises:
        ValidationFailed: If either field is invalid. ``findings`` holds one
            ERROR finding per failed field.
    """
    try:
        params = CallFunctionParams(gas_limit=gas_limit, attached_deposit=attached_deposit)
    except ValidationError as e:
        findings = _findings_from(e)
        fields = ", ".join(f.field for f in findings)
        raise ValidationFailed(f"Invalid function call: {fields} failed validation", findings) from e

    return ValidatedCall(gas_limit=params.gas_limit, attached_deposit=params.attached_deposit)


def check_call(gas_limit: GasInput, attached_deposit: NearInput) -> CallValidationReport:
    """Validate both call fields without raising.

    The report also carries plausibility warnings for raw integer inputs.
    """
    gas = safe_parse(QuantityKind.GAS, gas_limit, field="gas_limit")
    deposit = safe_parse(QuantityKind.NEAR, attached_deposit, field="attached_deposit")
    findings = gas.findings + deposit.findings

    if not (gas.ok and deposit.ok):
        return CallValidationReport(is_valid=False, findings=findings)

    assert gas.value is not None
    assert deposit.value is not None
    call = ValidatedCall(gas_limit=gas.value, attached_deposit=deposit.value)
    return CallValidationReport(is_valid=True, call=call, findings=findings)


# ─── Internal Helpers ────────────────────────────────────────────────


def _findings_from(error: ValidationError) -> list[ValidationFinding]:
    """Recover the per-field quantity errors pydantic collected."""
    findings: list[ValidationFinding] = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "call"
        cause = item.get("ctx", {}).get("error")
        if not isinstance(cause, QuantityError):
            cause = InvalidFormat(item["msg"], details={"type": item["type"]})
        findings.append(cause.to_finding(field))
    logger.debug("Call validation failed for %d field(s)", len(findings))
    return findings
