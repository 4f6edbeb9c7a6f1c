"""
Harness configuration.

Carries everything a validation run needs that is not the target class: the
seeded random source, default value factories, recursion bound, constructor
policy and property registry.
"""

from __future__ import annotations

import datetime
import pathlib
import random
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from ..utilities.constants import (
    DEFAULT_MAPPING_KEY,
    DEFAULT_MAX_DEPTH,
    IDENTITY_ACCESSOR,
    RANDOM_MAX,
    RANDOM_MIN,
    ConstructorPolicy,
)
from .environment import get_environment_config
from .registry import PropertyRegistry

ValueFactory = Callable[[], Any]


def default_factories(rng: random.Random) -> dict[Any, ValueFactory]:
    """Build the default factory table around ``rng``. Every call allocates a new value."""

    def positive() -> int:
        return rng.randint(RANDOM_MIN, RANDOM_MAX)

    def text() -> str:
        return str(positive())

    return {
        int: positive,
        float: lambda: float(positive()),
        complex: lambda: complex(positive(), 0),
        bool: lambda: True,
        str: text,
        bytes: lambda: text().encode(),
        bytearray: lambda: bytearray(text().encode()),
        Decimal: lambda: Decimal(1),
        datetime.datetime: datetime.datetime.now,
        datetime.date: datetime.date.today,
        datetime.time: lambda: datetime.datetime.now().time(),
        datetime.timedelta: lambda: datetime.timedelta(seconds=positive()),
        uuid.UUID: lambda: uuid.UUID(int=rng.getrandbits(128)),
        pathlib.Path: lambda: pathlib.Path(text()),
        pathlib.PurePath: lambda: pathlib.PurePath(text()),
        set: lambda: {text()},
        frozenset: lambda: frozenset({text()}),
        list: lambda: [text()],
        tuple: lambda: (text(),),
        dict: lambda: {DEFAULT_MAPPING_KEY: text()},
        object: object,
    }


@dataclass
class HarnessConfig:
    """
    Configuration for a validation run.

    A fixed ``seed`` makes synthesized values reproducible. Separate
    configs never share random state.
    """

    seed: int | None = None
    max_depth: int = DEFAULT_MAX_DEPTH
    constructor_policy: ConstructorPolicy = ConstructorPolicy.FIRST_SUCCESS
    registry: PropertyRegistry = field(default_factory=PropertyRegistry)
    default_ignored_accessors: frozenset[str] = frozenset({IDENTITY_ACCESSOR})
    rng: random.Random = field(init=False, repr=False)
    factories: dict[Any, ValueFactory] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        self.rng = random.Random(self.seed)
        self.factories = default_factories(self.rng)

    @classmethod
    def from_environment(cls, environ: dict[str, str] | None = None, **overrides: Any) -> HarnessConfig:
        """Create a config from ``POJO_KIT_*`` variables; keyword overrides win."""
        env = get_environment_config(environ)
        settings: dict[str, Any] = {
            "seed": env.seed,
            "max_depth": env.max_depth,
            "constructor_policy": env.constructor_policy,
        }
        settings.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**settings)

    def with_factories(self, custom: dict[Any, ValueFactory] | None) -> dict[Any, ValueFactory]:
        """Factory table for one run: custom factories first, then defaults."""
        if not custom:
            return dict(self.factories)
        return {**custom, **{k: v for k, v in self.factories.items() if k not in custom}}

    def ignored_accessors(self, extra: set[str] | frozenset[str] | None = None) -> frozenset[str]:
        return self.default_ignored_accessors | frozenset(extra or ())
