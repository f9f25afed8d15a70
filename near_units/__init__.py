"""
near-units: parse, validate and format NEAR gas and token amounts.

Architecture: Unit tables → Parser (+ plausibility check) → Call validator
Philosophy:  Strings carry their unit. Raw integers are base units, and we say so when they look wrong.
"""

from .call import CallFunctionParams, check_call, validate_call
from .conversions import (
    format_gas,
    format_near,
    format_quantity,
    from_ggas,
    from_micro_near,
    from_milli_near,
    from_near,
    from_tgas,
    from_tier,
    ggas,
    micro_near,
    milli_near,
    near,
    raw_gas,
    tgas,
    to_ggas,
    to_micro_near,
    to_milli_near,
    to_near,
    to_tgas,
    to_tier,
    yocto,
)
from .exceptions import InvalidFormat, QuantityError, UnknownUnit, ValidationFailed
from .models import (
    CallValidationReport,
    GasInput,
    NearInput,
    ParseOutcome,
    QuantityKind,
    Severity,
    ValidatedCall,
    ValidatedGas,
    ValidatedNear,
    ValidationFinding,
)
from .parser import parse_gas, parse_near, parse_quantity, safe_parse
from .plausibility import check_plausible
from .units import GAS_UNITS, NEAR_UNITS, GasTier, NearTier

__version__ = "1.0.0"

__all__ = [
    "GAS_UNITS",
    "NEAR_UNITS",
    "CallFunctionParams",
    "CallValidationReport",
    "GasInput",
    "GasTier",
    "InvalidFormat",
    "NearInput",
    "NearTier",
    "ParseOutcome",
    "QuantityError",
    "QuantityKind",
    "Severity",
    "UnknownUnit",
    "ValidatedCall",
    "ValidatedGas",
    "ValidatedNear",
    "ValidationFailed",
    "ValidationFinding",
    "check_call",
    "check_plausible",
    "format_gas",
    "format_near",
    "format_quantity",
    "from_ggas",
    "from_micro_near",
    "from_milli_near",
    "from_near",
    "from_tgas",
    "from_tier",
    "ggas",
    "micro_near",
    "milli_near",
    "near",
    "parse_gas",
    "parse_near",
    "parse_quantity",
    "raw_gas",
    "safe_parse",
    "tgas",
    "to_ggas",
    "to_micro_near",
    "to_milli_near",
    "to_near",
    "to_tgas",
    "to_tier",
    "yocto",
]
