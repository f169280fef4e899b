"""Parser contract for create-annotation events."""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Union

from ..events import AnnotationEvent


class ParserInterface(ABC):
    """Abstract base class for annotation parsers.

    A parser receives one event per annotation site and returns either an
    annotation instance or a falsy value when it does not handle the site.
    """

    @abstractmethod
    def on_create_annotation(
        self, event: Union[AnnotationEvent, Mapping[str, Any]]
    ) -> Any:
        """Return an annotation for the event, or a falsy value to skip it."""
        pass

    @abstractmethod
    def register_annotation(self, annotation: Any) -> "ParserInterface":
        """Register a single annotation."""
        pass

    @abstractmethod
    def register_annotations(self, annotations: Iterable[Any]) -> "ParserInterface":
        """Register many annotations at once."""
        pass
