"""
Configuration management for POJO Kit.

This package provides the harness configuration object, explicit property
registration and environment overrides.
"""

from .environment import Environment, get_environment_config
from .harness_config import HarnessConfig, ValueFactory, default_factories
from .registry import PropertyRegistry, PropertySpec

__all__ = [
    "Environment",
    "HarnessConfig",
    "PropertyRegistry",
    "PropertySpec",
    "ValueFactory",
    "default_factories",
    "get_environment_config",
]
