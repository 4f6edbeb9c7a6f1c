"""
Environment-driven configuration overrides.

Reads ``POJO_KIT_*`` variables so test runs can pin a seed or tune the
harness without code changes.
"""

import logging
import os
from dataclasses import dataclass

from ..utilities.constants import (
    DEFAULT_MAX_DEPTH,
    ENV_CONSTRUCTOR_POLICY,
    ENV_LOG_LEVEL,
    ENV_MAX_DEPTH,
    ENV_SEED,
    ConstructorPolicy,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Environment:
    """Snapshot of the harness environment variables."""

    seed: int | None = None
    max_depth: int = DEFAULT_MAX_DEPTH
    constructor_policy: ConstructorPolicy = ConstructorPolicy.FIRST_SUCCESS
    log_level: str = "WARNING"


def _int_or_default(name: str, raw: str | None, default: int | None) -> int | None:
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer")
        return default


def get_environment_config(environ: dict[str, str] | None = None) -> Environment:
    """Build an Environment from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ

    policy = ConstructorPolicy.FIRST_SUCCESS
    raw_policy = env.get(ENV_CONSTRUCTOR_POLICY)
    if raw_policy:
        try:
            policy = ConstructorPolicy.from_string(raw_policy)
        except ValueError as e:
            logger.warning(f"Ignoring {ENV_CONSTRUCTOR_POLICY}: {e}")

    max_depth = _int_or_default(ENV_MAX_DEPTH, env.get(ENV_MAX_DEPTH), DEFAULT_MAX_DEPTH)
    if max_depth is None or max_depth < 1:
        logger.warning(f"Ignoring {ENV_MAX_DEPTH}={max_depth}: must be positive")
        max_depth = DEFAULT_MAX_DEPTH

    return Environment(
        seed=_int_or_default(ENV_SEED, env.get(ENV_SEED), None),
        max_depth=max_depth,
        constructor_policy=policy,
        log_level=env.get(ENV_LOG_LEVEL, "WARNING").upper(),
    )
