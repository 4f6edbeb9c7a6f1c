"""
POJO harness entry points.

A PojoHarness is created per validation call. It builds exactly one object
under test on construction and, when the equality contract is checked,
exactly one clone.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import Any

from ..config.harness_config import HarnessConfig, ValueFactory
from ..domain.accessor_pair import AccessorPair
from ..domain.validation_report import ValidationReport
from ..utilities.backing_store import BackingStore
from ..utilities.errors import PojoKitError
from .accessor_discovery import AccessorDiscoverer
from .equality_verifier import EqualityContractVerifier
from .object_synthesizer import ObjectSynthesizer
from .property_exerciser import PropertyExerciser
from .value_synthesizer import ValueSynthesizer

logger = logging.getLogger(__name__)


class PojoHarness:
    """
    Validates accessor and equality contracts of one class.

    Args:
        cls: Class of the object under test
        custom_factories: Extra ``type -> zero-argument callable`` factories,
            consulted before the defaults for this run only
        ignored_accessors: Property or method names excluded from discovery
        ignored_equality_fields: Property names excluded from the
            one-property-at-a-time equality perturbation
        config: Harness configuration, read from the environment when omitted

    Raises:
        TypeError: If an ignore set is given as a bare string
        InstantiationFailure: If no object under test can be built
    """

    def __init__(
        self,
        cls: type,
        custom_factories: dict[Any, ValueFactory] | None = None,
        ignored_accessors: Iterable[str] | None = None,
        ignored_equality_fields: Iterable[str] | None = None,
        config: HarnessConfig | None = None,
    ) -> None:
        self.cls = cls
        self.config = config or HarnessConfig.from_environment()
        self.ignored_accessors = self.config.ignored_accessors(_names(ignored_accessors, "ignored_accessors"))
        self.ignored_equality_fields = _names(ignored_equality_fields, "ignored_equality_fields")
        self.report = ValidationReport(target=cls)

        self.values = ValueSynthesizer(self.config.with_factories(custom_factories), self.config.max_depth)
        self.objects = ObjectSynthesizer(self.values, self.config.constructor_policy)
        self.discoverer = AccessorDiscoverer(self.ignored_accessors, self.config.registry)
        self.backing = BackingStore(cls)

        self.object_under_test = self.objects.build(cls)
        self.report.constructor = str(self.objects.last_constructor)
        self._accessors: dict[str, AccessorPair] | None = None

    @property
    def accessors(self) -> dict[str, AccessorPair]:
        if self._accessors is None:
            self._accessors = self.discoverer.discover(self.cls)
        return self._accessors

    def test_accessors(self) -> None:
        """Round-trip every property of the object under test."""
        PropertyExerciser(self.values, self.backing, self.report).exercise(
            self.object_under_test, self.accessors
        )

    def test_equality_contract(self) -> None:
        """Verify ``__eq__`` and ``__hash__`` with a property-identical clone."""
        EqualityContractVerifier(self.objects, self.backing, self.report).verify_equality(
            self.object_under_test, self.accessors, self.ignored_equality_fields
        )

    def run(self, equality: bool = False) -> ValidationReport:
        """
        Run the accessor checks (and the equality checks when requested).

        Failures are recorded on the returned report and re-raised.
        """
        started = time.perf_counter()
        try:
            self.test_accessors()
            if equality:
                self.test_equality_contract()
        except PojoKitError as e:
            self.report.fail(e)
            raise
        finally:
            self.report.execution_time = time.perf_counter() - started
        logger.info(f"Validated {self.cls.__qualname__}: {len(self.report.outcomes)} checks passed")
        return self.report


def _names(names: Iterable[str] | None, argument: str) -> frozenset[str]:
    """Name set from an iterable of names; a bare string is rejected."""
    if isinstance(names, str):
        raise TypeError(f"{argument} must be a collection of names, not the string {names!r}")
    return frozenset(names or ())

def validate(
    cls: type,
    custom_factories: dict[Any, ValueFactory] | None = None,
    ignored_accessors: Iterable[str] | None = None,
    *,
    config: HarnessConfig | None = None,
) -> bool:
    """
    Validate constructors and getter/setter round trips of ``cls``.

    Returns:
        True when every check passes; any failure raises
    """
    PojoHarness(cls, custom_factories, ignored_accessors, config=config).run()
    return True


def validate_with_equality_contract(
    cls: type,
    custom_factories: dict[Any, ValueFactory] | None = None,
    ignored_accessors: Iterable[str] | None = None,
    ignored_equality_fields: Iterable[str] | None = None,
    *,
    config: HarnessConfig | None = None,
) -> bool:
    """
    Validate ``cls`` like :func:`validate`, then its ``__eq__``/``__hash__`` contract.

    Returns:
        True when every check passes; any failure raises
    """
    PojoHarness(cls, custom_factories, ignored_accessors, ignored_equality_fields, config).run(
        equality=True
    )
    return True
