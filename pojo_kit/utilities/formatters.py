"""
Formatting utilities for assertion messages and CLI output.
"""

import reprlib
from typing import Any

_short = reprlib.Repr()
_short.maxstring = 40
_short.maxother = 40


def format_value(value: Any) -> str:
    """Short repr with the type name, e.g. ``'123' (str)``."""
    return f"{_short.repr(value)} ({type(value).__qualname__})"


def format_identity(value: Any) -> str:
    """Value plus its object id, for identity mismatches."""
    return f"{format_value(value)} @ {id(value):#x}"


def format_expected_observed(expected: Any, observed: Any, identity: bool = False) -> str:
    """One-line expected-vs-observed summary."""
    render = format_identity if identity else format_value
    return f"expected {render(expected)}, observed {render(observed)}"


def format_type(target: type) -> str:
    """Dotted path of a class."""
    return f"{target.__module__}.{target.__qualname__}"


def format_duration(seconds: float | None) -> str:
    """Execution time for display."""
    if seconds is None:
        return "-"
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.2f}s"
