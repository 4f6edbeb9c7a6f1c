"""
Utilities package for POJO Kit.

Constants, the error taxonomy, annotation helpers, direct field access and
display helpers used throughout the harness.
"""

from .backing_store import BackingStore, candidate_fields, to_snake_case
from .constants import AccessorKind, ConstructorPolicy
from .errors import (
    ContractAssertionError,
    InstantiationFailure,
    PojoKitError,
    ReflectiveAccessFailure,
    UnsupportedTypeFailure,
)
from .formatters import format_duration, format_expected_observed, format_type, format_value
from .loader import load_class

__all__ = [
    "AccessorKind",
    "BackingStore",
    "ConstructorPolicy",
    "ContractAssertionError",
    "InstantiationFailure",
    "PojoKitError",
    "ReflectiveAccessFailure",
    "UnsupportedTypeFailure",
    "candidate_fields",
    "format_duration",
    "format_expected_observed",
    "format_type",
    "format_value",
    "load_class",
    "to_snake_case",
]
