"""Helpers for turning dotted type names into classes."""

import importlib
from typing import Any, Type

from .exceptions import InvalidArgumentError


def qualified_name(cls: Type[Any]) -> str:
    """Return the fully-qualified ``module.QualName`` of a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


def canonical_class_path(path: str) -> str:
    """Return ``path`` stripped and in dotted form (``module:Cls`` -> ``module.Cls``)."""
    return path.strip().replace(":", ".", 1)


def _import_attribute(module_name: str, attr_path: str) -> Any:
    obj: Any = importlib.import_module(module_name)
    for part in attr_path.split("."):
        obj = getattr(obj, part)
    return obj


def load_class(path: str) -> Type[Any]:
    """Load a class from a dotted path.

    Both ``package.module.ClassName`` and ``package.module:ClassName`` are
    accepted. With the dotted form the longest importable module prefix wins,
    so nested classes (``package.module.Outer.Inner``) resolve as well.

    Args:
        path: Dotted path naming a class

    Returns:
        The class object

    Raises:
        InvalidArgumentError: If the path is empty, cannot be imported, or
            does not name a class
    """
    if not isinstance(path, str) or not path.strip():
        raise InvalidArgumentError(f"Expected a dotted class path; received {path!r}")

    path = path.strip()
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
        candidates = [(module_name, attr_path)]
    else:
        parts = path.split(".")
        candidates = [
            (".".join(parts[:i]), ".".join(parts[i:]))
            for i in range(len(parts) - 1, 0, -1)
        ]

    obj = None
    for module_name, attr_path in candidates:
        if not module_name or not attr_path:
            continue
        try:
            obj = _import_attribute(module_name, attr_path)
            break
        except (ImportError, AttributeError):
            continue

    if obj is None:
        raise InvalidArgumentError(f'Cannot import a class from "{path}"')

    if not isinstance(obj, type):
        raise InvalidArgumentError(
            f'"{path}" does not name a class; received "{type(obj).__name__}"'
        )

    return obj
