"""Exceptions raised by the annotation registry and its handlers."""


class AnnotationError(Exception):
    """Base class for all code_annotations errors."""

    pass


class InvalidArgumentError(AnnotationError, ValueError):
    """Raised when a registry operation receives a value it cannot accept."""

    pass


class DuplicateRegistrationError(InvalidArgumentError):
    """Raised when a handler name is registered a second time."""

    pass


class HandlerNotFoundError(AnnotationError, LookupError):
    """Raised when a name does not resolve to any registered handler."""

    pass


class AnnotationContentError(AnnotationError, ValueError):
    """Raised by a handler when its annotation content is malformed."""

    pass
