"""
Value synthesis for arbitrary type hints.

Produces a fresh stand-in value for any requested type so accessors and
constructors can be driven without hand-written test data.
"""

from __future__ import annotations

import collections.abc
import enum
import inspect
import logging
import typing
from typing import Any

from ..config.harness_config import ValueFactory
from ..domain.type_descriptor import ConstructorDescriptor, TypeDescriptor
from ..utilities.constants import DEFAULT_MAPPING_KEY, DEFAULT_MAX_DEPTH
from ..utilities.errors import InstantiationFailure, UnsupportedTypeFailure
from ..utilities.type_hints import MISSING, is_union

logger = logging.getLogger(__name__)

# Abstract container hints and the concrete type synthesized for them
_CONCRETE_CONTAINERS: dict[Any, type] = {
    collections.abc.Iterable: list,
    collections.abc.Collection: list,
    collections.abc.Sequence: list,
    collections.abc.MutableSequence: list,
    collections.abc.Set: set,
    collections.abc.MutableSet: set,
    collections.abc.Mapping: dict,
    collections.abc.MutableMapping: dict,
}

_SEQUENCE_ORIGINS = (list, collections.abc.Sequence, collections.abc.MutableSequence,
                     collections.abc.Iterable, collections.abc.Collection)
_SET_ORIGINS = (set, collections.abc.Set, collections.abc.MutableSet)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)


class ValueSynthesizer:
    """
    Produces substitute values for type hints.

    Resolution order: typing wrappers, single-element containers, registered
    factories (custom before defaults), enumerations, zero-argument
    construction, then every other declared constructor with recursively
    synthesized arguments.
    """

    def __init__(self, factories: dict[Any, ValueFactory], max_depth: int = DEFAULT_MAX_DEPTH):
        self.factories = factories
        self.max_depth = max_depth
        self._depth = 0

    def synthesize(self, hint: Any) -> Any:
        """
        Return a new value for ``hint``.

        Raises:
            UnsupportedTypeFailure: If no resolution path succeeds
        """
        if self._depth >= self.max_depth:
            raise UnsupportedTypeFailure(
                hint, message=f"Nesting deeper than {self.max_depth} while synthesizing {hint!r}"
            )
        self._depth += 1
        try:
            return self._resolve(hint)
        finally:
            self._depth -= 1

    def synthesize_arguments(self, constructor: ConstructorDescriptor) -> dict[str, Any]:
        """Values for every parameter of ``constructor`` that needs one."""
        return {
            param.name: self.synthesize(param.hint)
            for param in constructor.parameters
            if param.needs_value
        }

    def _resolve(self, hint: Any) -> Any:
        if hint is MISSING or hint is typing.Any:
            return object()
        if hint is None or hint is type(None):
            return None

        origin = typing.get_origin(hint)
        args = typing.get_args(hint)

        if origin is typing.Annotated:
            return self.synthesize(args[0])
        if is_union(hint):
            return self._first_union_member(hint, args)
        if origin is typing.Literal:
            return args[0]
        if isinstance(hint, typing.NewType):
            return self.synthesize(hint.__supertype__)
        if isinstance(hint, typing.TypeVar):
            if hint.__bound__ is not None:
                return self.synthesize(hint.__bound__)
            raise UnsupportedTypeFailure(hint)
        if origin is type:
            return args[0] if args and inspect.isclass(args[0]) else object
        if origin is collections.abc.Callable or hint is collections.abc.Callable:
            return _fresh_callable()
        if isinstance(hint, str):
            raise UnsupportedTypeFailure(hint, message=f"Unresolved forward reference {hint!r}")

        if origin is not None:
            return self._container(hint, origin, args)

        factory = self.factories.get(hint)
        if factory is not None:
            return factory()

        concrete = _CONCRETE_CONTAINERS.get(hint)
        if concrete is not None:
            return self.factories[concrete]()

        if not inspect.isclass(hint):
            raise UnsupportedTypeFailure(hint)
        if issubclass(hint, enum.Enum):
            members = list(hint)
            if not members:
                raise UnsupportedTypeFailure(hint, message=f"Enumeration {hint.__qualname__} has no members")
            return members[0]
        if getattr(hint, "_is_protocol", False):
            raise UnsupportedTypeFailure(hint, message=f"Protocol {hint.__qualname__} cannot be instantiated")

        return self._construct(hint)

    def _first_union_member(self, hint: Any, args: tuple[Any, ...]) -> Any:
        attempts: list[tuple[str, BaseException]] = []
        for member in args:
            if member is type(None):
                continue
            try:
                return self.synthesize(member)
            except InstantiationFailure as e:
                attempts.append((repr(member), e))
        if type(None) in args:
            return None
        raise UnsupportedTypeFailure(hint, attempts)

    def _container(self, hint: Any, origin: Any, args: tuple[Any, ...]) -> Any:
        """One-slot container with a synthesized element."""
        if origin is tuple:
            if not args or args == ((),):
                return ()
            if len(args) == 2 and args[1] is Ellipsis:
                return (self.synthesize(args[0]),)
            return tuple(self.synthesize(arg) for arg in args)

        element = args[0] if args else str
        if origin in _MAPPING_ORIGINS:
            key = self.synthesize(args[0]) if args else DEFAULT_MAPPING_KEY
            value = self.synthesize(args[1]) if len(args) > 1 else self.synthesize(str)
            return {key: value}
        if origin is frozenset:
            return frozenset({self.synthesize(element)})
        if origin in _SET_ORIGINS:
            return {self.synthesize(element)}
        if origin in _SEQUENCE_ORIGINS:
            return [self.synthesize(element)]

        # Parameterized user generic: construct the bare origin
        if inspect.isclass(origin):
            return self.synthesize(origin)
        raise UnsupportedTypeFailure(hint)

    def _construct(self, cls: type) -> Any:
        """Zero-argument construction, else the first declared constructor that succeeds."""
        attempts: list[tuple[str, BaseException]] = []
        try:
            return cls()
        except Exception as e:
            logger.debug(f"{cls.__qualname__}() failed: {e}")
            attempts.append(("()", e))

        descriptor = TypeDescriptor.of(cls)
        for constructor in descriptor.constructors:
            if constructor.name == "__init__" and constructor.arity == 0:
                continue
            try:
                instance = constructor.invoke(self.synthesize_arguments(constructor))
            except Exception as e:
                logger.debug(f"{cls.__qualname__}.{constructor} failed: {e}")
                attempts.append((str(constructor), e))
                continue
            logger.debug(f"Synthesized {cls.__qualname__} via {constructor}")
            return instance

        raise UnsupportedTypeFailure(cls, attempts) from (attempts[-1][1] if attempts else None)


def _fresh_callable() -> Any:
    def synthesized(*args: Any, **kwargs: Any) -> None:
        return None

    return synthesized
