"""
Equality contract verification.

Clones the object under test, checks reflexivity, symmetry and hash
agreement, then nullifies one property at a time on the clone to prove each
property takes part in both ``__eq__`` and ``__hash__``.
"""

from __future__ import annotations

import logging
from typing import Any

from ..domain.accessor_pair import AccessorPair
from ..domain.validation_report import PropertyCheck, ValidationReport, ValidationStatus
from ..utilities.backing_store import BackingStore
from ..utilities.constants import NULLIFY_SENTINELS
from ..utilities.errors import ContractAssertionError, ReflectiveAccessFailure
from ..utilities.formatters import format_value
from ..utilities.type_hints import MISSING, strip_optional
from .object_synthesizer import ObjectSynthesizer

logger = logging.getLogger(__name__)


def nullify_sentinel(declared: Any, current: Any = None) -> Any:
    """Canonical empty value for ``declared`` (0, 0.0, False, 0j), else None."""
    hint = strip_optional(declared)
    if hint is MISSING:
        hint = type(current)
    return NULLIFY_SENTINELS.get(hint)


class EqualityContractVerifier:
    """Checks ``__eq__``/``__hash__`` against the discovered properties."""

    def __init__(
        self,
        objects: ObjectSynthesizer,
        backing: BackingStore,
        report: ValidationReport | None = None,
    ) -> None:
        self.objects = objects
        self.backing = backing
        self.report = report

    def verify_equality(
        self,
        instance: Any,
        accessors: dict[str, AccessorPair],
        ignored_equality_fields: frozenset[str] = frozenset(),
    ) -> None:
        """
        Verify the equality contract of ``instance``.

        Raises:
            ContractAssertionError: Naming the property or operator that broke the contract
        """
        clone = self.objects.build(type(instance))
        self.copy_properties(instance, clone, accessors)

        _check(instance == instance, "__eq__", "Equality must match with self")
        _check(not (instance == object()), "__eq__", "Must not be equal with an unrelated object")
        _check(instance == clone, "__eq__", "Must be equal with an object of same properties")
        _check(clone == instance, "__eq__", "Equality must be symmetric")
        _check(
            _hash(instance) == _hash(clone),
            "__hash__",
            "Hash must match for an object of same properties",
        )
        self._record("__eq__/__hash__")

        for name, pair in accessors.items():
            if name in ignored_equality_fields:
                logger.debug(f"Skipping {name!r}: ignored for equality")
                self._record(name, ValidationStatus.SKIPPED, "ignored")
                continue

            self.copy_properties(instance, clone, accessors)
            current = self._read(instance, pair)
            sentinel = nullify_sentinel(pair.read_type, current)
            self._assign(clone, pair, sentinel)
            logger.debug(f"Nullified {name!r} on clone to {sentinel!r}")

            _check(
                not (instance == clone),
                name,
                f"Must not be equal with object of different property "
                f"({format_value(current)} vs {format_value(sentinel)})",
            )
            _check(
                _hash(instance) != _hash(clone),
                name,
                "Hash must differ for object of different property",
            )
            self._record(name)

    def copy_properties(self, source: Any, target: Any, accessors: dict[str, AccessorPair]) -> None:
        """Shallow copy of every property value from ``source`` into ``target``."""
        for pair in accessors.values():
            self._assign(target, pair, self._read(source, pair))

    def _read(self, instance: Any, pair: AccessorPair) -> Any:
        if pair.getter is not None:
            return pair.getter.read(instance)
        return self.backing.read(instance, pair.name, pair.field_name)

    def _assign(self, instance: Any, pair: AccessorPair, value: Any) -> None:
        try:
            self.backing.write(instance, pair.name, value, pair.field_name)
        except ReflectiveAccessFailure:
            if pair.setter is None:
                raise
            pair.setter.write(instance, value)

    def _record(self, name: str, status: ValidationStatus = ValidationStatus.PASSED, detail: str = "") -> None:
        if self.report is not None:
            self.report.record(name, PropertyCheck.EQUALITY, status, detail)


def _check(condition: bool, name: str, message: str) -> None:
    if not condition:
        raise ContractAssertionError(name, message)


def _hash(value: Any) -> int:
    try:
        return hash(value)
    except TypeError as e:
        raise ContractAssertionError(
            "__hash__", f"{type(value).__qualname__} is not hashable: {e}"
        ) from e
