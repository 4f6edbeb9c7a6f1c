"""
Accessor and AccessorPair value objects.

An AccessorPair groups the getter and setter of one logical property. Each
side is either a plain method (``get_name``/``set_name``) or a Python
``property``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..utilities.constants import AccessorKind
from ..utilities.type_hints import MISSING


@dataclass(frozen=True)
class Accessor:
    """
    One side of a property.

    For METHOD accessors ``member`` is the method name and the getter is
    called with no arguments, the setter with one. For PROPERTY accessors
    ``member`` is the attribute name and reads/writes go through
    ``getattr``/``setattr``.
    """

    member: str
    kind: AccessorKind
    declared_type: Any = MISSING
    function: Callable[..., Any] | None = None

    def read(self, target: Any) -> Any:
        """Invoke as a getter."""
        if self.kind is AccessorKind.PROPERTY:
            return getattr(target, self.member)
        return getattr(target, self.member)()

    def write(self, target: Any, value: Any) -> Any:
        """Invoke as a setter and return whatever the setter returned."""
        if self.kind is AccessorKind.PROPERTY:
            setattr(target, self.member, value)
            return None
        return getattr(target, self.member)(value)

    def __str__(self) -> str:
        if self.kind is AccessorKind.PROPERTY:
            return f"@{self.member}"
        return f"{self.member}()"


@dataclass
class AccessorPair:
    """Getter and setter of a logical property, plus an optional backing field name."""

    name: str
    getter: Accessor | None = None
    setter: Accessor | None = None
    field_name: str | None = None

    def has_both(self) -> bool:
        return self.getter is not None and self.setter is not None

    def is_read_only(self) -> bool:
        return self.getter is not None and self.setter is None

    @property
    def declared_type(self) -> Any:
        """Setter argument type, else getter return type, else ``MISSING``."""
        if self.setter is not None and self.setter.declared_type is not MISSING:
            return self.setter.declared_type
        if self.getter is not None:
            return self.getter.declared_type
        return MISSING

    @property
    def read_type(self) -> Any:
        """Getter return type, else setter argument type."""
        if self.getter is not None and self.getter.declared_type is not MISSING:
            return self.getter.declared_type
        if self.setter is not None:
            return self.setter.declared_type
        return MISSING

    def merge(self, other: AccessorPair) -> AccessorPair:
        """Accumulate the accessors found in ``other`` into this pair."""
        if other.getter is not None:
            self.getter = other.getter
        if other.setter is not None:
            self.setter = other.setter
        if other.field_name is not None:
            self.field_name = other.field_name
        return self
