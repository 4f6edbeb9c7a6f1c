"""
Annotation helpers.

Resolves the declared types of accessor and constructor parameters, tolerating
forward references that cannot be evaluated at runtime.
"""

import inspect
import logging
import types
import typing
from collections.abc import Callable
from typing import Any

from .constants import VALUE_KINDS

logger = logging.getLogger(__name__)

# Sentinel for "no annotation present"
MISSING = inspect.Parameter.empty


def resolve_hints(func: Callable[..., Any], owner: type | None = None) -> dict[str, Any]:
    """
    Return the evaluated annotations of ``func``.

    Falls back to the raw annotations when evaluation fails. String
    annotations naming ``owner`` resolve to ``owner``; any other unresolved
    string resolves to ``object``.
    """
    try:
        return typing.get_type_hints(func)
    except Exception as e:  # NameError, TypeError from unresolvable forward refs
        logger.debug(f"Could not evaluate annotations of {func!r}: {e}")

    raw = inspect.get_annotations(func) if callable(func) else {}
    resolved: dict[str, Any] = {}
    for name, hint in raw.items():
        if isinstance(hint, str):
            if owner is not None and hint.strip("'\" ") == owner.__name__:
                resolved[name] = owner
            else:
                resolved[name] = object
        else:
            resolved[name] = hint
    return resolved


def call_parameters(func: Callable[..., Any]) -> list[inspect.Parameter]:
    """Positional/keyword parameters of ``func`` excluding ``*args`` and ``**kwargs``."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return []
    return [
        p
        for p in signature.parameters.values()
        if p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    ]


def required_arity(func: Callable[..., Any]) -> int:
    """Number of parameters without defaults, ``self`` included for plain functions."""
    return sum(1 for p in call_parameters(func) if p.default is MISSING)


def declared_arity(func: Callable[..., Any]) -> int:
    """Total number of named parameters, ``self`` included for plain functions."""
    return len(call_parameters(func))


def return_hint(func: Callable[..., Any], owner: type | None = None) -> Any:
    """Declared return type of ``func`` or ``MISSING``."""
    return resolve_hints(func, owner).get("return", MISSING)


def first_argument_hint(func: Callable[..., Any], owner: type | None = None) -> Any:
    """Declared type of the first parameter after ``self`` or ``MISSING``."""
    params = call_parameters(func)
    if len(params) < 2:
        return MISSING
    return resolve_hints(func, owner).get(params[1].name, MISSING)


def is_union(hint: Any) -> bool:
    """True for ``Union[...]``, ``Optional[...]`` and ``X | Y``."""
    origin = typing.get_origin(hint)
    return origin is typing.Union or origin is types.UnionType


def strip_optional(hint: Any) -> Any:
    """``Optional[X]`` -> ``X``; anything else is returned unchanged."""
    if is_union(hint):
        members = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return hint


def is_value_kind(hint: Any) -> bool:
    """True when values of ``hint`` are compared by equality instead of identity."""
    hint = strip_optional(hint)
    if typing.get_origin(hint) is typing.Annotated:
        hint = typing.get_args(hint)[0]
    if typing.get_origin(hint) is not None or not isinstance(hint, type):
        return False
    return issubclass(hint, VALUE_KINDS)


def describe_hint(hint: Any) -> str:
    """Short human-readable form of a type hint."""
    if hint is MISSING:
        return "-"
    if isinstance(hint, type) and typing.get_origin(hint) is None:
        return hint.__qualname__
    return repr(hint).replace("typing.", "")
