"""
TypeDescriptor value object.

Describes a type hint together with the constructors through which an
instance of it can be created.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from ..utilities.type_hints import MISSING, call_parameters, resolve_hints


@dataclass(frozen=True)
class ParameterDescriptor:
    """One parameter of a constructor."""

    name: str
    hint: Any
    has_default: bool = False
    positional_only: bool = False

    @property
    def needs_value(self) -> bool:
        """Unannotated parameters with a default keep that default."""
        if self.positional_only:
            return True
        return not (self.has_default and self.hint is MISSING)


@dataclass(frozen=True)
class ConstructorDescriptor:
    """
    A way of creating an instance of a class.

    The class call itself is named ``__init__``; alternate constructors are
    classmethods whose return annotation names the class.
    """

    name: str
    factory: Callable[..., Any]
    parameters: tuple[ParameterDescriptor, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def invoke(self, arguments: dict[str, Any]) -> Any:
        """Call the constructor; positional-only parameters are passed by position."""
        positional = [
            arguments[p.name] for p in self.parameters if p.positional_only and p.name in arguments
        ]
        keywords = {
            p.name: arguments[p.name]
            for p in self.parameters
            if not p.positional_only and p.name in arguments
        }
        return self.factory(*positional, **keywords)

    def __str__(self) -> str:
        params = ", ".join(p.name for p in self.parameters)
        return f"{self.name}({params})"


@dataclass(frozen=True)
class TypeDescriptor:
    """Identity of a type hint plus its declared constructors."""

    hint: Any
    origin: Any = None
    args: tuple[Any, ...] = ()
    constructors: tuple[ConstructorDescriptor, ...] = field(default=(), compare=False)

    @classmethod
    def of(cls, hint: Any) -> TypeDescriptor:
        """Describe ``hint``; constructors are only collected for plain classes."""
        origin = typing.get_origin(hint)
        args = typing.get_args(hint)
        constructors: tuple[ConstructorDescriptor, ...] = ()
        if origin is None and inspect.isclass(hint):
            constructors = tuple(declared_constructors(hint))
        return cls(hint=hint, origin=origin, args=args, constructors=constructors)


def _describe(params: list[inspect.Parameter], hints: dict[str, Any]) -> tuple[ParameterDescriptor, ...]:
    return tuple(
        ParameterDescriptor(
            name=p.name,
            hint=hints.get(p.name, MISSING),
            has_default=p.default is not MISSING,
            positional_only=p.kind is inspect.Parameter.POSITIONAL_ONLY,
        )
        for p in params
    )


def _class_call_parameters(owner: type) -> tuple[ParameterDescriptor, ...]:
    """Parameters of ``owner(...)``, typed from ``__init__``/``__new__`` and class annotations."""
    params = call_parameters(owner)
    if owner.__init__ is not object.__init__:
        hints = resolve_hints(owner.__init__, owner)
    elif owner.__new__ is not object.__new__:
        hints = resolve_hints(owner.__new__, owner)
    else:
        hints = {}
    if any(p.name not in hints for p in params):
        class_hints = resolve_hints(owner, owner)
        hints = {**class_hints, **hints}
    return _describe(params, hints)


def _returns_owner(func: Callable[..., Any], owner: type) -> bool:
    returned = resolve_hints(func, owner).get("return", MISSING)
    if returned is MISSING:
        return False
    if returned is owner or returned is getattr(typing, "Self", None):
        return True
    return inspect.isclass(returned) and issubclass(returned, owner)


def declared_constructors(owner: type) -> list[ConstructorDescriptor]:
    """The class call first, then alternate classmethod constructors in declaration order."""
    constructors = [ConstructorDescriptor("__init__", owner, _class_call_parameters(owner))]

    seen: set[str] = set()
    for klass in owner.__mro__:
        if klass is object:
            continue
        for attr_name, attr in vars(klass).items():
            if attr_name in seen or not isinstance(attr, classmethod):
                continue
            seen.add(attr_name)
            if attr_name.startswith("_") or not _returns_owner(attr.__func__, owner):
                continue
            constructors.append(
                ConstructorDescriptor(
                    attr_name,
                    getattr(owner, attr_name),
                    _describe(call_parameters(attr.__func__)[1:], resolve_hints(attr.__func__, owner)),
                )
            )
    return constructors
