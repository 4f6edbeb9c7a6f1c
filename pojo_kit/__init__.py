"""
POJO Kit - automatic contract tests for plain data classes.

This package provides a harness that, without per-field assertions:
- Builds an instance through every declared constructor
- Round-trips every getter/setter pair (or property)
- Checks read-only properties against their backing field
- Verifies __eq__/__hash__ by perturbing one property at a time
"""

__version__ = "1.0.0"
__author__ = "POJO Kit Developers"
__description__ = "Automatic accessor and equality contract tests for plain data classes"

from .config import HarnessConfig, PropertyRegistry, PropertySpec
from .core import PojoHarness, validate, validate_with_equality_contract
from .domain import AccessorPair, ValidationReport, ValidationStatus
from .utilities.constants import AccessorKind, ConstructorPolicy
from .utilities.errors import (
    ContractAssertionError,
    InstantiationFailure,
    PojoKitError,
    ReflectiveAccessFailure,
    UnsupportedTypeFailure,
)

__all__ = [
    "AccessorKind",
    "AccessorPair",
    "ConstructorPolicy",
    "ContractAssertionError",
    "HarnessConfig",
    "InstantiationFailure",
    "PojoHarness",
    "PojoKitError",
    "PropertyRegistry",
    "PropertySpec",
    "ReflectiveAccessFailure",
    "UnsupportedTypeFailure",
    "ValidationReport",
    "ValidationStatus",
    "validate",
    "validate_with_equality_contract",
]
