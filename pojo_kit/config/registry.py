"""
Explicit property registration.

Classes whose accessors do not follow the ``get_x``/``set_x`` convention (or
whose getters read a field with an unrelated name) can declare their
properties here instead of relying on discovery.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..domain.accessor_pair import Accessor, AccessorPair
from ..utilities.constants import AccessorKind
from ..utilities.type_hints import MISSING


@dataclass(frozen=True)
class PropertySpec:
    """
    Declaration of one property.

    Args:
        name: Logical property name
        getter: Name of the getter method or property
        setter: Name of the setter method or property, None when read-only
        field: Attribute storing the value, None to locate it by name
        declared_type: Type used to synthesize values
        kind: Whether getter/setter are methods or properties
    """

    name: str
    getter: str | None = None
    setter: str | None = None
    field: str | None = None
    declared_type: Any = MISSING
    kind: AccessorKind = AccessorKind.METHOD

    def to_pair(self) -> AccessorPair:
        getter = Accessor(self.getter, self.kind, self.declared_type) if self.getter else None
        setter = Accessor(self.setter, self.kind, self.declared_type) if self.setter else None
        return AccessorPair(self.name, getter, setter, self.field)


class PropertyRegistry:
    """Maps a class to its explicitly declared properties."""

    def __init__(self) -> None:
        self._entries: dict[type, tuple[PropertySpec, ...]] = {}

    def register(self, owner: type, specs: Iterable[PropertySpec]) -> None:
        specs = tuple(specs)
        names = [spec.name for spec in specs]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate property names registered for {owner.__qualname__}: {names}")
        self._entries[owner] = specs

    def pairs_for(self, owner: type) -> list[AccessorPair]:
        return [spec.to_pair() for spec in self._entries.get(owner, ())]

    def __contains__(self, owner: object) -> bool:
        return owner in self._entries
