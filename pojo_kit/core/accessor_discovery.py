"""
Accessor discovery.

Extracts the logical properties of a class from its Python properties and
from ``get_x``/``is_x``/``set_x`` (or ``getX``/``isX``/``setX``) methods.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
from collections.abc import Iterator
from typing import Any

from ..config.registry import PropertyRegistry
from ..domain.accessor_pair import Accessor, AccessorPair
from ..utilities.constants import GETTER_PREFIXES, IDENTITY_ACCESSOR, SETTER_PREFIXES, AccessorKind
from ..utilities.type_hints import (
    MISSING,
    declared_arity,
    first_argument_hint,
    required_arity,
    resolve_hints,
    return_hint,
)

logger = logging.getLogger(__name__)


def split_accessor_name(method_name: str) -> tuple[str, str] | None:
    """
    Classify a method name.

    Returns:
        ``("get", prop)`` or ``("set", prop)``, None when the name is not an accessor

    ``get_first_name`` -> ``("get", "first_name")``,
    ``getFirstName`` -> ``("get", "firstName")``, ``settle`` -> None.
    """
    for role, prefixes in (("get", GETTER_PREFIXES), ("set", SETTER_PREFIXES)):
        for prefix in prefixes:
            if not method_name.startswith(prefix):
                continue
            rest = method_name[len(prefix) :]
            if not rest:
                continue
            if prefix.endswith("_"):
                if rest[0] != "_":
                    return role, rest
            elif rest[0].isupper():
                return role, rest[0].lower() + rest[1:]
    return None


class AccessorDiscoverer:
    """Builds the ordered ``property name -> AccessorPair`` map of a class."""

    def __init__(
        self,
        ignored_accessors: frozenset[str] = frozenset({IDENTITY_ACCESSOR}),
        registry: PropertyRegistry | None = None,
    ) -> None:
        self.ignored_accessors = ignored_accessors
        self.registry = registry if registry is not None else PropertyRegistry()

    def discover(self, cls: type) -> dict[str, AccessorPair]:
        """Return every property of ``cls`` keyed and ordered by name."""
        if cls in self.registry:
            pairs = [self._typed(cls, pair) for pair in self.registry.pairs_for(cls)]
            found = {pair.name: pair for pair in pairs if not self._ignored(pair.name)}
        else:
            found = {}
            for pair in self._scan(cls):
                if pair.name in found:
                    found[pair.name].merge(pair)
                else:
                    found[pair.name] = pair

        discovered = dict(sorted(found.items()))
        logger.debug(f"Discovered properties of {cls.__qualname__}: {list(discovered)}")
        return discovered

    def _ignored(self, *names: str) -> bool:
        return any(name in self.ignored_accessors for name in names)

    def _scan(self, cls: type) -> Iterator[AccessorPair]:
        for attr_name, attr in _public_attributes(cls):
            if isinstance(attr, property):
                if self._ignored(attr_name):
                    continue
                yield _property_pair(cls, attr_name, attr)
                continue

            if isinstance(attr, (staticmethod, classmethod)) or not inspect.isfunction(attr):
                continue

            split = split_accessor_name(attr_name)
            if split is None:
                continue
            role, prop = split
            if self._ignored(attr_name, prop):
                continue

            if role == "get" and required_arity(attr) == 1:
                hint = return_hint(attr, cls)
                if hint is MISSING:
                    hint = _field_type(cls, prop)
                yield AccessorPair(prop, getter=Accessor(attr_name, AccessorKind.METHOD, hint, attr))
            elif role == "set" and declared_arity(attr) == 2:
                hint = first_argument_hint(attr, cls)
                if hint is MISSING:
                    hint = _field_type(cls, prop)
                yield AccessorPair(prop, setter=Accessor(attr_name, AccessorKind.METHOD, hint, attr))

    def _typed(self, cls: type, pair: AccessorPair) -> AccessorPair:
        """Fill in declared types a registry entry left open."""
        fallback = _field_type(cls, pair.field_name or pair.name)
        if pair.getter is not None and pair.getter.declared_type is MISSING:
            hint = _accessor_type(cls, pair.getter, "get")
            pair.getter = dataclasses.replace(pair.getter, declared_type=hint if hint is not MISSING else fallback)
        if pair.setter is not None and pair.setter.declared_type is MISSING:
            hint = _accessor_type(cls, pair.setter, "set")
            pair.setter = dataclasses.replace(pair.setter, declared_type=hint if hint is not MISSING else fallback)
        return pair


def _public_attributes(cls: type) -> Iterator[tuple[str, Any]]:
    """Public class attributes, nearest definition first, ``object`` excluded."""
    seen: set[str] = set()
    for klass in cls.__mro__:
        if klass is object:
            continue
        for attr_name, attr in vars(klass).items():
            if attr_name in seen:
                continue
            seen.add(attr_name)
            if not attr_name.startswith("_"):
                yield attr_name, attr


def _property_pair(cls: type, name: str, prop: property) -> AccessorPair:
    getter = setter = None
    getter_type = return_hint(prop.fget, cls) if prop.fget is not None else MISSING
    if getter_type is MISSING:
        getter_type = _field_type(cls, name)
    if prop.fget is not None:
        getter = Accessor(name, AccessorKind.PROPERTY, getter_type, prop.fget)
    if prop.fset is not None:
        setter_type = first_argument_hint(prop.fset, cls)
        setter = Accessor(
            name,
            AccessorKind.PROPERTY,
            setter_type if setter_type is not MISSING else getter_type,
            prop.fset,
        )
    return AccessorPair(name, getter, setter)


def _accessor_type(cls: type, accessor: Accessor, role: str) -> Any:
    attr = inspect.getattr_static(cls, accessor.member, None)
    if isinstance(attr, property):
        func = attr.fget if role == "get" else attr.fset
    else:
        func = attr if inspect.isfunction(attr) else None
    if func is None:
        return MISSING
    return return_hint(func, cls) if role == "get" else first_argument_hint(func, cls)


def _field_type(cls: type, name: str) -> Any:
    """Class-level annotation for ``name`` or ``_name``."""
    annotations = resolve_hints(cls, cls)
    for candidate in (name, f"_{name}"):
        if candidate in annotations:
            return annotations[candidate]
    return MISSING
