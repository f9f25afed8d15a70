"""
Exception hierarchy for quantity parsing and call validation.

Each exception type maps to one category of failure so callers can branch
on the class (or on the machine-readable ``code``) instead of the message.
"""

from __future__ import annotations

from .models import Severity, ValidationFinding


class QuantityError(ValueError):
    """Base exception for all quantity failures.

    Subclasses ``ValueError`` so pydantic field validators collect it
    alongside their own errors.
    """

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_finding(self, field: str) -> ValidationFinding:
        """Render this error as an ERROR finding attached to ``field``."""
        return ValidationFinding(
            severity=Severity.ERROR,
            code=self.code,
            field=field,
            message=self.message,
            details=self.details,
        )


class InvalidFormat(QuantityError):
    """The input does not have the ``<number><unit>`` shape for its kind."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_FORMAT", message, details)


class UnknownUnit(QuantityError):
    """The unit suffix is not present in the kind's unit table."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_UNIT", message, details)


class ValidationFailed(QuantityError):
    """One or more fields of a composite call failed to parse."""

    def __init__(
        self,
        message: str,
        findings: list[ValidationFinding],
        details: dict | None = None,
    ):
        self.findings = findings
        details = dict(details or {})
        details.setdefault("fields", [f.field for f in findings])
        super().__init__("VALIDATION_FAILED", message, details)
