"""
Resolves ``module:Class`` (or ``module.Class``) paths given on the command line.
"""

import importlib
import inspect


def load_class(path: str) -> type:
    """
    Import and return the class named by ``path``.

    Raises:
        ValueError: If the path is malformed or does not name a class
        ImportError: If the module cannot be imported
    """
    if not path or not path.strip():
        raise ValueError("Class path cannot be empty")

    if ":" in path:
        module_name, _, qualname = path.partition(":")
    else:
        module_name, _, qualname = path.rpartition(".")
    if not module_name or not qualname:
        raise ValueError(f"Invalid class path: {path!r}. Expected 'package.module:ClassName'")

    target = importlib.import_module(module_name)
    for part in qualname.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ValueError(f"{module_name} has no attribute {qualname!r}") from e

    if not inspect.isclass(target):
        raise ValueError(f"{path!r} is not a class")
    return target
