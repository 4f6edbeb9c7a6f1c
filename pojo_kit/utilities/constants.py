"""
Constants and enumerations shared across the harness.

Holds the value-kind table, nullify sentinels, accessor naming prefixes and
the bounds used by the default value factories.
"""

from enum import Enum

# Default value factory bounds
RANDOM_MIN = 1
RANDOM_MAX = 32767

# Recursion bound for nested value synthesis
DEFAULT_MAX_DEPTH = 8

# Key used by the default mapping factory
DEFAULT_MAPPING_KEY = "1"

# Kinds compared by value rather than identity
VALUE_KINDS: tuple[type, ...] = (bool, int, float, complex)

# Canonical "empty" value per value kind; any other kind nullifies to None
NULLIFY_SENTINELS: dict[type, object] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
}

# Accessor naming prefixes, longest first so "is_" wins over "is"
GETTER_PREFIXES: tuple[str, ...] = ("get_", "is_", "get", "is")
SETTER_PREFIXES: tuple[str, ...] = ("set_", "set")

# The identity accessor (get_class / getClass) is never exercised
IDENTITY_ACCESSOR = "class"

# Environment variable names
ENV_SEED = "POJO_KIT_SEED"
ENV_MAX_DEPTH = "POJO_KIT_MAX_DEPTH"
ENV_CONSTRUCTOR_POLICY = "POJO_KIT_CONSTRUCTOR_POLICY"
ENV_LOG_LEVEL = "POJO_KIT_LOG_LEVEL"

# Emoji constants for console output
EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"
EMOJI_WARNING = "⚠️"
EMOJI_INFO = "ℹ️"


class ConstructorPolicy(Enum):
    """Which successful constructor supplies the object under test."""

    FIRST_SUCCESS = "first"
    LAST_SUCCESS = "last"

    @classmethod
    def from_string(cls, value: str) -> "ConstructorPolicy":
        """Parse a policy name ('first' or 'last', case-insensitive)."""
        normalized = value.strip().lower()
        for policy in cls:
            if policy.value == normalized or policy.name.lower() == normalized:
                return policy
        raise ValueError(f"Unknown constructor policy: {value!r}. Expected 'first' or 'last'")


class AccessorKind(Enum):
    """How an accessor is invoked on the object under test."""

    METHOD = "method"
    PROPERTY = "property"
