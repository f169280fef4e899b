"""Code annotations.

Registry and resolver for annotation handlers:
- Registry: from .registry import AnnotationRegistry, NOT_APPLICABLE
- Event-driven parser: from .parser import GenericAnnotationParser
- Handler contract: from .annotation import AnnotationInterface, AbstractAnnotation
"""

from .annotation import (
    AbstractAnnotation,
    AnnotationInterface,
    JsonAnnotation,
    KeyValueAnnotation,
)
from .decorators import create_register_decorator, register_annotation_class
from .events import AnnotationEvent
from .exceptions import (
    AnnotationContentError,
    AnnotationError,
    DuplicateRegistrationError,
    HandlerNotFoundError,
    InvalidArgumentError,
)
from .parser import GenericAnnotationParser, ParserInterface
from .registry import (
    NOT_APPLICABLE,
    AliasTable,
    AnnotationRegistry,
    HandlerEntry,
    normalize_alias,
)

__version__ = "0.1.0"

__all__ = [
    "AbstractAnnotation",
    "AliasTable",
    "AnnotationContentError",
    "AnnotationError",
    "AnnotationEvent",
    "AnnotationInterface",
    "AnnotationRegistry",
    "DuplicateRegistrationError",
    "GenericAnnotationParser",
    "HandlerEntry",
    "HandlerNotFoundError",
    "InvalidArgumentError",
    "JsonAnnotation",
    "KeyValueAnnotation",
    "NOT_APPLICABLE",
    "ParserInterface",
    "create_register_decorator",
    "normalize_alias",
    "register_annotation_class",
]
