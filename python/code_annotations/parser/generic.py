"""Generic annotation parser.

Expects registration of AnnotationInterface implementations. Copies of the
registered instances are passed the annotation content through their
``initialize()`` method, and are then responsible for parsing it.
"""

from typing import Any, Iterable, Mapping, Union

from ..annotation.base import AnnotationInterface
from ..events import AnnotationEvent
from ..registry import AnnotationRegistry, Sentinel
from .interface import ParserInterface


class GenericAnnotationParser(AnnotationRegistry, ParserInterface):
    """Annotation registry that answers create-annotation events."""

    def on_create_annotation(
        self, event: Union[AnnotationEvent, Mapping[str, Any]]
    ) -> Union[AnnotationInterface, Sentinel]:
        """Attempt to return an annotation instance for the event.

        If the annotation class or alias is not registered, returns
        NOT_APPLICABLE. Otherwise resolves the class, copies it and, if any
        content is present, calls ``initialize()`` with the content.

        Args:
            event: An AnnotationEvent, or a mapping of event params with
                ``class`` and ``content`` keys
        """
        if isinstance(event, AnnotationEvent):
            get_param = event.get_param
        else:
            get_param = event.get

        return self.dispatch(get_param("class", False), get_param("content", ""))

    def register_annotation(self, annotation: Any) -> "GenericAnnotationParser":
        self.register(annotation)
        return self

    def register_annotations(
        self, annotations: Iterable[Any]
    ) -> "GenericAnnotationParser":
        self.register_many(annotations)
        return self
