"""
Property round-trip checks.

Drives every discovered property through its setter and getter (or a direct
field write and the getter for read-only properties) and fails on the first
contract violation.
"""

from __future__ import annotations

import logging
from typing import Any

from ..domain.accessor_pair import AccessorPair
from ..domain.validation_report import PropertyCheck, ValidationReport, ValidationStatus
from ..utilities.backing_store import BackingStore
from ..utilities.constants import VALUE_KINDS
from ..utilities.errors import ContractAssertionError
from ..utilities.formatters import format_expected_observed, format_identity
from ..utilities.type_hints import is_value_kind
from .value_synthesizer import ValueSynthesizer

logger = logging.getLogger(__name__)


def compares_by_value(declared: Any, expected: Any) -> bool:
    """Value kinds are compared with ``==``; everything else by identity."""
    return is_value_kind(declared) or isinstance(expected, VALUE_KINDS)


class PropertyExerciser:
    """Round-trips values through the accessors of an object under test."""

    def __init__(
        self,
        values: ValueSynthesizer,
        backing: BackingStore,
        report: ValidationReport | None = None,
    ) -> None:
        self.values = values
        self.backing = backing
        self.report = report

    def exercise(self, instance: Any, accessors: dict[str, AccessorPair]) -> None:
        """
        Exercise every property of ``instance`` in name order.

        Raises:
            ContractAssertionError: On the first value or fluent-return mismatch
            ReflectiveAccessFailure: If a read-only property has no backing field
        """
        for name, pair in accessors.items():
            if pair.has_both():
                self._round_trip(instance, pair)
                self._record(name, PropertyCheck.ROUND_TRIP)
            elif pair.getter is not None:
                self._direct_field(instance, pair)
                self._record(name, PropertyCheck.DIRECT_FIELD)
            else:
                logger.debug(f"Skipping {name!r}: no getter")
                self._record(name, PropertyCheck.ROUND_TRIP, ValidationStatus.SKIPPED, "setter only")

    def _round_trip(self, instance: Any, pair: AccessorPair) -> None:
        value = self.values.synthesize(pair.declared_type)
        returned = pair.setter.write(instance, value)

        # Fluent setters must hand back the receiver
        if returned is not None and returned is not instance:
            raise ContractAssertionError(
                pair.name,
                f"Return of setter {pair.setter} must be the object under test, "
                f"observed {format_identity(returned)}",
                expected=instance,
                observed=returned,
            )

        logger.debug(f"Round-tripping {pair.name!r} through {pair.setter} / {pair.getter}")
        self.verify_getter(instance, pair, value)

    def _direct_field(self, instance: Any, pair: AccessorPair) -> None:
        value = self.values.synthesize(pair.read_type)
        self.backing.write(instance, pair.name, value, pair.field_name)
        logger.debug(f"Wrote {pair.name!r} directly, reading back through {pair.getter}")
        self.verify_getter(instance, pair, value)

    def verify_getter(self, instance: Any, pair: AccessorPair, expected: Any) -> None:
        """Read ``pair`` and compare with ``expected`` by value or identity."""
        observed = pair.getter.read(instance)
        if compares_by_value(pair.read_type, expected):
            if observed != expected:
                raise ContractAssertionError(
                    pair.name,
                    f"{pair.name} is different: {format_expected_observed(expected, observed)}",
                    expected=expected,
                    observed=observed,
                )
        elif observed is not expected:
            raise ContractAssertionError(
                pair.name,
                f"{pair.name} is not the same instance: "
                f"{format_expected_observed(expected, observed, identity=True)}",
                expected=expected,
                observed=observed,
            )

    def _record(
        self,
        name: str,
        check: PropertyCheck,
        status: ValidationStatus = ValidationStatus.PASSED,
        detail: str = "",
    ) -> None:
        if self.report is not None:
            self.report.record(name, check, status, detail)
