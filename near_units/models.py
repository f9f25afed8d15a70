"""
Data model for parsed quantities and validation results.

Canonical quantities are plain integers tagged with their kind through a
distinct ``int`` subclass: a ``ValidatedGas`` can only come out of the parser
or a conversion helper, and still behaves as an ``int`` everywhere else.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


# ─── Kinds ──────────────────────────────────────────────────────────


class QuantityKind(str, Enum):
    """Which unit table and plausibility threshold apply."""

    GAS = "GAS"
    NEAR = "NEAR"


class Severity(str, Enum):
    """Severity of a validation finding."""

    ERROR = "ERROR"  # Input rejected
    WARNING = "WARNING"  # Accepted, but probably not what the caller meant


# ─── Canonical Quantities ───────────────────────────────────────────


class ValidatedGas(int):
    """Gas amount in base gas units that has passed validation."""

    kind = QuantityKind.GAS

    def __repr__(self) -> str:
        return f"ValidatedGas({int(self)})"


class ValidatedNear(int):
    """NEAR amount in yoctoNEAR that has passed validation."""

    kind = QuantityKind.NEAR

    def __repr__(self) -> str:
        return f"ValidatedNear({int(self)})"


Validated = Union[ValidatedGas, ValidatedNear]

# Accepted raw inputs: "<number> <unit>" strings or base-unit integers
GasInput = Union[str, int]
NearInput = Union[str, int]

_VALIDATED_TYPES: dict[QuantityKind, type] = {
    QuantityKind.GAS: ValidatedGas,
    QuantityKind.NEAR: ValidatedNear,
}


def wrap(kind: QuantityKind, value: int) -> Validated:
    """Tag a base-unit integer with its kind's validated type."""
    return _VALIDATED_TYPES[kind](value)


# ─── Findings ───────────────────────────────────────────────────────


class ValidationFinding(BaseModel):
    """A single finding with severity, machine-readable code, and details."""

    severity: Severity
    code: str  # e.g. "INVALID_FORMAT"
    field: str  # Which input this relates to
    message: str
    details: dict = Field(default_factory=dict)


# ─── Results ────────────────────────────────────────────────────────


class ParseOutcome(BaseModel):
    """Structured result of parsing a single quantity."""

    kind: QuantityKind
    value: Optional[int] = None
    findings: list[ValidationFinding] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not any(f.severity == Severity.ERROR for f in self.findings)

    @property
    def warnings(self) -> list[ValidationFinding]:
        return [f for f in self.findings if f.severity == Severity.WARNING]


class ValidatedCall(BaseModel):
    """Gas limit and attached deposit of a function call, both in base units.

    Fields come back as ``ValidatedGas`` and ``ValidatedNear``; a validated
    amount of the wrong kind is rejected.
    """

    model_config = ConfigDict(frozen=True)

    gas_limit: int = Field(ge=0, description="Gas limit in gas units")
    attached_deposit: int = Field(ge=0, description="Attached deposit in yoctoNEAR")

    @field_validator("gas_limit", "attached_deposit", mode="before")
    @classmethod
    def _reject_other_kind(cls, value: object, info: ValidationInfo) -> object:
        expected = _FIELD_KINDS[info.field_name]
        got = getattr(value, "kind", expected)
        if got != expected:
            raise ValueError(
                f"{info.field_name} expects a {expected.value} amount, got {value!r}"
            )
        return value

    @field_validator("gas_limit", "attached_deposit")
    @classmethod
    def _tag(cls, value: int, info: ValidationInfo) -> Validated:
        return wrap(_FIELD_KINDS[info.field_name], value)


_FIELD_KINDS: dict[str, QuantityKind] = {
    "gas_limit": QuantityKind.GAS,
    "attached_deposit": QuantityKind.NEAR,
}


class CallValidationReport(BaseModel):
    """Outcome of validating a function call without raising."""

    is_valid: bool
    call: Optional[ValidatedCall] = None
    findings: list[ValidationFinding] = Field(default_factory=list)

    @property
    def errors(self) -> list[ValidationFinding]:
        return [f for f in self.findings if f.severity == Severity.ERROR]
