"""
Property-based tests for the harness.

Uses Hypothesis to check that validation outcomes do not depend on the seed
and that accessor naming rules hold for arbitrary identifiers.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pojo_kit import HarnessConfig, validate, validate_with_equality_contract
from pojo_kit.core.accessor_discovery import split_accessor_name
from pojo_kit.core.equality_verifier import nullify_sentinel
from pojo_kit.core.value_synthesizer import ValueSynthesizer
from pojo_kit.utilities.backing_store import to_snake_case
from pojo_kit.utilities.constants import RANDOM_MAX, RANDOM_MIN, ConstructorPolicy
from pojo_kit.utilities.errors import ContractAssertionError
from tests.fixtures.pojos import (
    BrokenHashPair,
    EqualPair,
    FrozenQuote,
    GenericProduct,
    Pair,
    Point,
)

seeds = st.integers(min_value=0, max_value=2**32 - 1)
snake_names = st.from_regex(r"[a-z][a-z0-9]*(_[a-z0-9]+)*", fullmatch=True).filter(lambda s: len(s) <= 30)
camel_names = st.from_regex(r"[a-z][a-z0-9]*([A-Z][a-z0-9]*)*", fullmatch=True).filter(lambda s: len(s) <= 30)


class TestSeedIndependence:
    """Validation outcomes hold for every seed."""

    @given(seed=seeds)
    @settings(max_examples=25, deadline=None)
    def test_equal_pair_always_validates(self, seed):
        """Property: a class with complete equality passes for any seed."""
        assert validate_with_equality_contract(EqualPair, config=HarnessConfig(seed=seed))

    @pytest.mark.parametrize("cls", [Pair, Point, FrozenQuote, GenericProduct])
    @given(seed=seeds)
    @settings(max_examples=10, deadline=None)
    def test_well_behaved_classes_validate(self, cls, seed):
        """Property: well-behaved classes pass accessor checks for any seed."""
        assert validate(cls, config=HarnessConfig(seed=seed))

    @given(seed=seeds)
    @settings(max_examples=25, deadline=None)
    def test_broken_hash_always_detected(self, seed):
        """Property: a property missing from the hash is always reported."""
        with pytest.raises(ContractAssertionError) as exc_info:
            validate_with_equality_contract(BrokenHashPair, config=HarnessConfig(seed=seed))
        assert exc_info.value.property_name == "count"


class TestValueProperties:
    """Invariants of synthesized values."""

    @given(seed=seeds)
    @settings(max_examples=50)
    def test_ints_within_bounds(self, seed):
        """Property: synthesized ints stay within the factory bounds."""
        config = HarnessConfig(seed=seed)
        value = ValueSynthesizer(config.with_factories(None)).synthesize(int)
        assert RANDOM_MIN <= value <= RANDOM_MAX

    @given(seed=seeds, kind=st.sampled_from([int, float, complex, bool]))
    @settings(max_examples=50)
    def test_synthesized_values_differ_from_sentinel(self, seed, kind):
        """Property: nullifying always changes a synthesized value kind."""
        config = HarnessConfig(seed=seed)
        value = ValueSynthesizer(config.with_factories(None)).synthesize(kind)
        assert value != nullify_sentinel(kind, value)

    @given(seed=seeds)
    @settings(max_examples=25)
    def test_same_seed_same_values(self, seed):
        """Property: equal seeds reproduce the same value sequence."""
        first = ValueSynthesizer(HarnessConfig(seed=seed).with_factories(None))
        second = ValueSynthesizer(HarnessConfig(seed=seed).with_factories(None))
        assert [first.synthesize(str) for _ in range(5)] == [second.synthesize(str) for _ in range(5)]


class TestNamingProperties:
    """Accessor naming rules for arbitrary identifiers."""

    @given(name=snake_names, prefix=st.sampled_from(["get_", "is_"]))
    def test_snake_getters(self, name, prefix):
        """Property: get_x and is_x name property x."""
        assert split_accessor_name(prefix + name) == ("get", name)

    @given(name=snake_names)
    def test_snake_setters(self, name):
        """Property: set_x names property x."""
        assert split_accessor_name("set_" + name) == ("set", name)

    @given(name=camel_names, prefix=st.sampled_from(["get", "is", "set"]))
    def test_java_style(self, name, prefix):
        """Property: getX/isX/setX name property x with its first letter lowered."""
        capitalized = name[0].upper() + name[1:]
        role = "set" if prefix == "set" else "get"
        assert split_accessor_name(prefix + capitalized) == (role, name)

    @given(name=snake_names)
    def test_snake_case_is_idempotent(self, name):
        """Property: snake-case names are left unchanged."""
        assert to_snake_case(name) == name
        assert to_snake_case(to_snake_case(name)) == name

    @given(name=camel_names)
    def test_snake_case_has_no_capitals(self, name):
        """Property: converted names are all lower case."""
        assert to_snake_case(name) == to_snake_case(name).lower()

    @given(policy=st.sampled_from(list(ConstructorPolicy)), upper=st.booleans())
    def test_policy_round_trip(self, policy, upper):
        """Property: policies parse back from their value in any case."""
        text = policy.value.upper() if upper else policy.value
        assert ConstructorPolicy.from_string(text) is policy
