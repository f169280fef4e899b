"""Annotation handler registry with alias resolution.

The registry keeps one prototype instance per handler name plus a table of
aliases. Resolving a name follows the alias chain to a registered name and
returns a deep copy of that prototype, so every caller gets an isolated
handler.

## Alias normalization

Alias keys are lower-cased and stripped of ``-``, ``_``, space, ``\\`` and
``/``, so ``My-Annotation_Name`` and ``myannotationname`` are the same alias.
Handler names themselves are matched exactly.

## Usage

```python
from code_annotations.annotation import JsonAnnotation
from code_annotations.registry import AnnotationRegistry

registry = AnnotationRegistry()
registry.register(JsonAnnotation)
registry.set_alias("options", "code_annotations.annotation.builtins.JsonAnnotation")

annotation = registry.dispatch("Options", '({"label": "Name"})')
annotation.value  # {"label": "Name"}
```
"""

import copy
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple, Union

from .annotation.base import AnnotationInterface
from .exceptions import (
    DuplicateRegistrationError,
    HandlerNotFoundError,
    InvalidArgumentError,
)
from .logging_config import logger
from .utils import canonical_class_path, load_class, qualified_name

_ALIAS_SEPARATORS = ("-", "_", " ", "\\", "/")
_CONTENT_DELIMITERS = "()"


class Sentinel(Enum):
    """Sentinel results returned instead of a handler."""

    NOT_APPLICABLE = "not_applicable"

    def __bool__(self) -> bool:
        return False


# Returned by dispatch() when no handler is registered for a name
NOT_APPLICABLE = Sentinel.NOT_APPLICABLE


def normalize_alias(alias: str) -> str:
    """Normalize an alias name for lookup."""
    for separator in _ALIAS_SEPARATORS:
        alias = alias.replace(separator, "")
    return alias.lower()


def _trim_delimiters(content: str) -> str:
    """Remove one leading "(" and one trailing ")" if present."""
    opening, closing = _CONTENT_DELIMITERS
    if content.startswith(opening):
        content = content[1:]
    if content.endswith(closing):
        content = content[:-1]
    return content


def _describe(value: Any) -> str:
    if isinstance(value, type):
        return qualified_name(value)
    return type(value).__name__


@dataclass(frozen=True)
class HandlerEntry:
    """A registered handler name and its prototype instance.

    Attributes:
        name: Identity the handler was registered under
        prototype: Instance copied on every resolution
    """

    name: str
    prototype: AnnotationInterface


class AliasTable:
    """Mapping of normalized alias names to their targets.

    Targets are kept verbatim; they may be handler names or other aliases.
    """

    def __init__(self) -> None:
        self._aliases: Dict[str, str] = {}

    def __contains__(self, alias: object) -> bool:
        return isinstance(alias, str) and normalize_alias(alias) in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)

    def get(self, alias: str) -> str:
        return self._aliases[normalize_alias(alias)]

    def set(self, alias: str, target: str) -> None:
        self._aliases[normalize_alias(alias)] = target

    def chase(self, name: str) -> str:
        """Follow aliases from ``name`` until a non-alias value is reached."""
        while name in self:
            name = self.get(name)
        return name

    def would_cycle(self, alias: str, target: str) -> bool:
        """Check whether pointing ``alias`` at ``target`` would close a loop.

        Every hop is normalized, so a target that normalizes to the alias
        itself counts as a loop too.
        """
        key = normalize_alias(alias)
        visited = {key}
        current = target
        while True:
            normalized = normalize_alias(current)
            if normalized in visited:
                return True
            if normalized not in self._aliases:
                return False
            visited.add(normalized)
            current = self._aliases[normalized]

    def as_dict(self) -> Dict[str, str]:
        return dict(self._aliases)


class AnnotationRegistry:
    """Registry of annotation handler prototypes and their aliases.

    Registration is append-only. Build the registry once, then use
    :meth:`dispatch` or :meth:`resolve` from any number of readers.
    """

    def __init__(self) -> None:
        self._entries: List[HandlerEntry] = []
        self._names: Dict[str, HandlerEntry] = {}
        self._aliases = AliasTable()

    def register(self, annotation: Union[str, type, AnnotationInterface]) -> None:
        """Register an annotation handler.

        Args:
            annotation: Dotted class path of an AnnotationInterface
                implementation, the class itself, or an actual instance.
                Paths are registered stripped and in dotted form.

        Raises:
            InvalidArgumentError: If the value cannot be turned into an
                AnnotationInterface instance
            DuplicateRegistrationError: If the resolved name is already registered
        """
        name = None
        if isinstance(annotation, str):
            annotation, name = load_class(annotation), canonical_class_path(annotation)

        if isinstance(annotation, type):
            if not issubclass(annotation, AnnotationInterface):
                raise InvalidArgumentError(
                    f"Expected an implementation of AnnotationInterface; "
                    f'received "{_describe(annotation)}"'
                )
            name = name or qualified_name(annotation)
            try:
                annotation = annotation()
            except TypeError as e:
                raise InvalidArgumentError(
                    f'Cannot construct a default instance of "{name}": {e}'
                ) from e

        if not isinstance(annotation, AnnotationInterface):
            raise InvalidArgumentError(
                f"Expected an instance of AnnotationInterface; "
                f'received "{_describe(annotation)}"'
            )

        name = name or qualified_name(type(annotation))

        if name in self._names:
            raise DuplicateRegistrationError(
                f"An annotation for this class {name} already exists"
            )

        entry = HandlerEntry(name=name, prototype=annotation)
        self._entries.append(entry)
        self._names[name] = entry
        logger.info("Annotation handler registered: %s", name)

    def register_many(self, annotations: Iterable) -> "AnnotationRegistry":
        """Register many annotations at once.

        Items are registered in iteration order. The first failure propagates;
        items registered before it stay registered.

        Raises:
            InvalidArgumentError: If annotations is not iterable
        """
        if isinstance(annotations, str) or not isinstance(annotations, Iterable):
            raise InvalidArgumentError(
                f'Expected an iterable of annotations; received "{_describe(annotations)}"'
            )

        for annotation in annotations:
            self.register(annotation)
        return self

    def has_handler(self, name: str) -> bool:
        """Check if a handler is registered by name or alias."""
        if not isinstance(name, str):
            return False
        return name in self._names or self.has_alias(name)

    def has_alias(self, alias: str) -> bool:
        """Check if an alias by the provided name exists."""
        return alias in self._aliases

    def set_alias(self, alias: str, target: str) -> "AnnotationRegistry":
        """Alias an annotation name.

        Args:
            alias: Alias to create; stored normalized
            target: A registered annotation name or another alias

        Raises:
            InvalidArgumentError: If the target is unknown, or the alias
                would become part of a cycle
        """
        if not isinstance(alias, str) or not normalize_alias(alias):
            raise InvalidArgumentError(f"Cannot use {alias!r} as an alias")

        if not isinstance(target, str) or (
            target not in self._names and not self.has_alias(target)
        ):
            raise InvalidArgumentError(
                f'Cannot alias "{alias}" to "{target}", as "{target}" is not '
                f"currently a registered annotation or alias"
            )

        if self._aliases.would_cycle(alias, target):
            raise InvalidArgumentError(
                f'Cannot alias "{alias}" to "{target}", as "{target}" already '
                f'resolves through "{alias}"'
            )

        self._aliases.set(alias, target)
        logger.debug("Alias set: %s -> %s", normalize_alias(alias), target)
        return self

    def resolve_alias(self, alias: str) -> str:
        """Follow an alias chain to the name it finally points at."""
        return self._aliases.chase(alias)

    def resolve(self, name: str) -> AnnotationInterface:
        """Resolve a name or alias to a fresh copy of its handler prototype.

        Raises:
            HandlerNotFoundError: If no handler is registered under the
                fully-resolved name
        """
        resolved = self.resolve_alias(name)
        entry = self._names.get(resolved)
        if entry is None:
            raise HandlerNotFoundError(
                f'No annotation handler registered for "{name}"'
                + (f' (resolved to "{resolved}")' if resolved != name else "")
            )
        return copy.deepcopy(entry.prototype)

    def dispatch(
        self, name: str, content: str = ""
    ) -> Union[AnnotationInterface, Sentinel]:
        """Create an annotation handler for a name and raw content.

        If the name is empty or not registered, returns NOT_APPLICABLE.
        Otherwise resolves the handler, copies it and, if any content is
        left after trimming the enclosing parentheses, calls
        ``initialize()`` with it. Errors raised by the handler propagate.
        """
        if not name or not self.has_handler(name):
            logger.debug("No annotation handler for %r", name)
            return NOT_APPLICABLE

        content = _trim_delimiters(content or "")

        annotation = self.resolve(name)
        if content:
            annotation.initialize(content)
        return annotation

    @property
    def handler_names(self) -> Tuple[str, ...]:
        """Registered handler names in registration order."""
        return tuple(entry.name for entry in self._entries)

    @property
    def aliases(self) -> Dict[str, str]:
        """Copy of the alias table, normalized alias to target."""
        return self._aliases.as_dict()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_handler(name)

    def __len__(self) -> int:
        return len(self._entries)
