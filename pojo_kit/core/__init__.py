"""
Core harness components.
"""

from .accessor_discovery import AccessorDiscoverer, split_accessor_name
from .equality_verifier import EqualityContractVerifier, nullify_sentinel
from .harness import PojoHarness, validate, validate_with_equality_contract
from .object_synthesizer import ObjectSynthesizer
from .property_exerciser import PropertyExerciser
from .value_synthesizer import ValueSynthesizer

__all__ = [
    "AccessorDiscoverer",
    "EqualityContractVerifier",
    "ObjectSynthesizer",
    "PojoHarness",
    "PropertyExerciser",
    "ValueSynthesizer",
    "nullify_sentinel",
    "split_accessor_name",
    "validate",
    "validate_with_equality_contract",
]
