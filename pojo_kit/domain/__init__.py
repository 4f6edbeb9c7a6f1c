"""
Domain value objects for the POJO harness.
"""

from .accessor_pair import Accessor, AccessorPair
from .type_descriptor import ConstructorDescriptor, ParameterDescriptor, TypeDescriptor
from .validation_report import PropertyCheck, PropertyOutcome, ValidationReport, ValidationStatus

__all__ = [
    "Accessor",
    "AccessorPair",
    "ConstructorDescriptor",
    "ParameterDescriptor",
    "PropertyCheck",
    "PropertyOutcome",
    "TypeDescriptor",
    "ValidationReport",
    "ValidationStatus",
]
