"""
Unit tests for configuration, environment parsing and the property registry.
"""

import logging

import pytest

from pojo_kit.config import HarnessConfig, PropertyRegistry, PropertySpec
from pojo_kit.config.environment import get_environment_config
from pojo_kit.utilities.constants import DEFAULT_MAX_DEPTH, ConstructorPolicy
from tests.fixtures.pojos import Pair, Registered


class TestEnvironment:
    """Test cases for POJO_KIT_* parsing."""

    def test_defaults(self):
        """Test an empty environment yields defaults."""
        env = get_environment_config({})
        assert env.seed is None
        assert env.max_depth == DEFAULT_MAX_DEPTH
        assert env.constructor_policy is ConstructorPolicy.FIRST_SUCCESS
        assert env.log_level == "WARNING"

    def test_values(self):
        """Test every variable is read."""
        env = get_environment_config(
            {
                "POJO_KIT_SEED": "42",
                "POJO_KIT_MAX_DEPTH": "3",
                "POJO_KIT_CONSTRUCTOR_POLICY": "LAST",
                "POJO_KIT_LOG_LEVEL": "debug",
            }
        )
        assert env.seed == 42
        assert env.max_depth == 3
        assert env.constructor_policy is ConstructorPolicy.LAST_SUCCESS
        assert env.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "variables",
        [
            {"POJO_KIT_SEED": "abc"},
            {"POJO_KIT_MAX_DEPTH": "0"},
            {"POJO_KIT_MAX_DEPTH": "deep"},
            {"POJO_KIT_CONSTRUCTOR_POLICY": "random"},
        ],
    )
    def test_invalid_values_ignored(self, variables, caplog):
        """Test invalid values fall back to defaults with a warning."""
        with caplog.at_level(logging.WARNING, logger="pojo_kit.config.environment"):
            env = get_environment_config(variables)

        assert env.seed is None
        assert env.max_depth == DEFAULT_MAX_DEPTH
        assert env.constructor_policy is ConstructorPolicy.FIRST_SUCCESS
        assert "Ignoring" in caplog.text


class TestHarnessConfig:
    """Test cases for HarnessConfig."""

    def test_invalid_max_depth(self):
        """Test a non-positive recursion bound is rejected."""
        with pytest.raises(ValueError, match="max_depth"):
            HarnessConfig(max_depth=0)

    def test_from_environment_overrides(self):
        """Test explicit overrides win and None overrides are dropped."""
        config = HarnessConfig.from_environment(
            {"POJO_KIT_SEED": "5", "POJO_KIT_MAX_DEPTH": "4"},
            seed=9,
            max_depth=None,
        )
        assert config.seed == 9
        assert config.max_depth == 4

    def test_seeded_sources_are_independent(self):
        """Test two configs with the same seed do not share random state."""
        first, second = HarnessConfig(seed=3), HarnessConfig(seed=3)
        assert first.rng is not second.rng
        assert first.factories[int]() == second.factories[int]()

    def test_with_factories_order(self):
        """Test custom factories come before the defaults."""
        config = HarnessConfig(seed=1)
        marker = object()
        factories = config.with_factories({Pair: lambda: marker})

        assert next(iter(factories)) is Pair
        assert factories[Pair]() is marker
        assert Pair not in config.factories

    def test_ignored_accessors(self):
        """Test the identity accessor is always ignored."""
        config = HarnessConfig()
        assert config.ignored_accessors() == frozenset({"class"})
        assert config.ignored_accessors({"area"}) == frozenset({"class", "area"})

    def test_policy_parsing(self):
        """Test constructor policies parse by value or name."""
        assert ConstructorPolicy.from_string("first") is ConstructorPolicy.FIRST_SUCCESS
        assert ConstructorPolicy.from_string(" Last_Success ") is ConstructorPolicy.LAST_SUCCESS
        with pytest.raises(ValueError):
            ConstructorPolicy.from_string("middle")


class TestPropertyRegistry:
    """Test cases for PropertyRegistry."""

    def test_register_and_lookup(self, registry):
        """Test registered specs become accessor pairs."""
        registry.register(Registered, [PropertySpec("value", getter="value", setter="update_value", field="_v")])

        assert Registered in registry
        pair = registry.pairs_for(Registered)[0]
        assert pair.has_both()
        assert pair.field_name == "_v"

    def test_duplicate_names_rejected(self, registry):
        """Test two specs with one name are rejected."""
        with pytest.raises(ValueError, match="Duplicate"):
            registry.register(Registered, [PropertySpec("value", getter="value"), PropertySpec("value")])

    def test_registration_replaces_previous(self, registry):
        """Test registering a class again replaces its specs."""
        registry.register(Registered, [PropertySpec("label", getter="label")])
        registry.register(Registered, [PropertySpec("value", getter="value")])

        assert [pair.name for pair in registry.pairs_for(Registered)] == ["value"]
        assert Pair not in PropertyRegistry()
