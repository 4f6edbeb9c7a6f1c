"""
Object under test construction.

Attempts every declared constructor of the target class so that all of them
are exercised, and keeps one successful instance according to the configured
policy.
"""

from __future__ import annotations

import logging
from typing import Any

from ..domain.type_descriptor import ConstructorDescriptor, TypeDescriptor
from ..utilities.constants import ConstructorPolicy
from ..utilities.errors import InstantiationFailure
from .value_synthesizer import ValueSynthesizer

logger = logging.getLogger(__name__)


class ObjectSynthesizer:
    """Builds live instances of a target class."""

    def __init__(
        self,
        values: ValueSynthesizer,
        policy: ConstructorPolicy = ConstructorPolicy.FIRST_SUCCESS,
    ) -> None:
        self.values = values
        self.policy = policy
        self.last_constructor: ConstructorDescriptor | None = None

    def build(self, cls: type) -> Any:
        """
        Create an instance of ``cls``.

        Every constructor is attempted. With FIRST_SUCCESS the earliest
        success is kept, with LAST_SUCCESS each success replaces the
        previous candidate.

        Raises:
            InstantiationFailure: If no constructor succeeds
        """
        descriptor = TypeDescriptor.of(cls)
        attempts: list[tuple[str, BaseException]] = []
        candidate: Any = None
        chosen: ConstructorDescriptor | None = None

        for constructor in descriptor.constructors:
            try:
                instance = constructor.invoke(self.values.synthesize_arguments(constructor))
            except Exception as e:
                logger.debug(f"Constructor {cls.__qualname__}.{constructor} failed: {e}")
                attempts.append((str(constructor), e))
                continue

            logger.debug(f"Constructor {cls.__qualname__}.{constructor} succeeded")
            if chosen is None or self.policy is ConstructorPolicy.LAST_SUCCESS:
                candidate, chosen = instance, constructor

        if chosen is None:
            cause = attempts[-1][1] if attempts else None
            raise InstantiationFailure(cls, attempts) from cause

        self.last_constructor = chosen
        logger.info(f"Built {cls.__qualname__} via {chosen}")
        return candidate
