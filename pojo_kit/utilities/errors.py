"""
Error taxonomy for the POJO harness.

Every failure is fatal to the validation call that raised it. Causes are
chained with ``raise ... from`` so the originating exception stays visible.
"""

from typing import Any


def _type_name(target: Any) -> str:
    return getattr(target, "__qualname__", None) or repr(target)


class PojoKitError(Exception):
    """Base class for all harness failures."""


class InstantiationFailure(PojoKitError):
    """
    No constructor of a type could be synthesized.

    Attributes:
        target: The type (or typing hint) that could not be instantiated
        attempts: ``(constructor name, error)`` for each constructor tried
    """

    def __init__(
        self,
        target: Any,
        attempts: list[tuple[str, BaseException]] | None = None,
        message: str | None = None,
    ) -> None:
        self.target = target
        self.attempts = list(attempts or [])
        super().__init__(message or self._build_message())

    def _build_message(self) -> str:
        text = f"Unable to create object of type {_type_name(self.target)}"
        if self.attempts:
            tried = "; ".join(f"{name}: {error}" for name, error in self.attempts)
            text += f" (tried {tried})"
        return text


class UnsupportedTypeFailure(InstantiationFailure):
    """A nested type has no factory and no constructor that can be synthesized."""

    def _build_message(self) -> str:
        text = f"Unsupported type {_type_name(self.target)}: no factory and no usable constructor"
        if self.attempts:
            tried = "; ".join(f"{name}: {error}" for name, error in self.attempts)
            text += f" (tried {tried})"
        return text


class ReflectiveAccessFailure(PojoKitError):
    """A field or accessor expected by naming convention could not be located."""

    def __init__(self, member: str, owner: Any, reason: str | None = None) -> None:
        self.member = member
        self.owner = owner
        message = f"Member [{member}] not found in class [{_type_name(owner)}]"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ContractAssertionError(PojoKitError, AssertionError):
    """An accessor, fluent setter or equality/hash outcome broke the contract."""

    def __init__(
        self,
        property_name: str,
        message: str,
        expected: Any = None,
        observed: Any = None,
    ) -> None:
        self.property_name = property_name
        self.expected = expected
        self.observed = observed
        super().__init__(f"[{property_name}] {message}")
