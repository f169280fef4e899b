"""Annotation parsers."""

from .generic import GenericAnnotationParser
from .interface import ParserInterface

__all__ = [
    "GenericAnnotationParser",
    "ParserInterface",
]
