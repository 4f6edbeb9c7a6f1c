"""
Direct access to the storage behind a property.

Getter-only properties are validated by writing straight into the field the
getter is expected to read. Only fields that actually exist on the instance
(``__dict__`` entries or ``__slots__`` members) or that a registry entry
names explicitly are used; writes bypass ``__setattr__`` so frozen
dataclasses can be exercised.
"""

import inspect
import logging
import re
import types
from typing import Any

from .errors import ReflectiveAccessFailure

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """``firstName`` -> ``first_name``."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def candidate_fields(owner: type, name: str) -> list[str]:
    """Field names that may back property ``name``, most specific first."""
    bases = [name]
    snake = to_snake_case(name)
    if snake != name:
        bases.append(snake)

    candidates: list[str] = []
    for base in bases:
        candidates.append(base)
        candidates.append(f"_{base}")
        for klass in owner.__mro__:
            if klass is object:
                continue
            candidates.append(f"_{klass.__name__.lstrip('_')}__{base}")
    return list(dict.fromkeys(candidates))


class BackingStore:
    """Locates, reads and writes the storage of properties on one class."""

    def __init__(self, owner: type) -> None:
        self.owner = owner
        self._located: dict[str, str] = {}

    def locate(self, instance: Any, name: str, field_name: str | None = None) -> str:
        """
        Return the attribute that stores property ``name`` on ``instance``.

        Raises:
            ReflectiveAccessFailure: If no such attribute exists
        """
        if field_name is not None:
            if not self._has_storage(instance, field_name, explicit=True):
                raise ReflectiveAccessFailure(field_name, self.owner, "registered field does not exist")
            return field_name

        if name in self._located:
            return self._located[name]

        for candidate in candidate_fields(self.owner, name):
            if self._has_storage(instance, candidate):
                logger.debug(f"Property {name!r} of {self.owner.__qualname__} is stored in {candidate!r}")
                self._located[name] = candidate
                return candidate

        raise ReflectiveAccessFailure(name, self.owner, "no backing field found")

    def read(self, instance: Any, name: str, field_name: str | None = None) -> Any:
        field = self.locate(instance, name, field_name)
        try:
            return object.__getattribute__(instance, field)
        except AttributeError as e:
            raise ReflectiveAccessFailure(field, self.owner, str(e)) from e

    def write(self, instance: Any, name: str, value: Any, field_name: str | None = None) -> None:
        field = self.locate(instance, name, field_name)
        try:
            object.__setattr__(instance, field, value)
        except (AttributeError, TypeError) as e:
            raise ReflectiveAccessFailure(field, self.owner, str(e)) from e

    def _has_storage(self, instance: Any, field: str, explicit: bool = False) -> bool:
        static = inspect.getattr_static(type(instance), field, None)
        if isinstance(static, types.MemberDescriptorType):
            return True
        instance_dict = getattr(instance, "__dict__", None)
        if instance_dict is not None and field in instance_dict:
            return True
        # A registered field may not have been assigned yet
        return explicit and instance_dict is not None and not isinstance(static, property)
