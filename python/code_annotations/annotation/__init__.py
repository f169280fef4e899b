"""Annotation handler contract and reference handlers."""

from .base import AbstractAnnotation, AnnotationInterface
from .builtins import JsonAnnotation, KeyValueAnnotation

__all__ = [
    "AnnotationInterface",
    "AbstractAnnotation",
    "JsonAnnotation",
    "KeyValueAnnotation",
]
