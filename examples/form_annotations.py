"""
Form annotations registered into a parser.

This example wires a GenericAnnotationParser the way a source scanner would
use it: handlers and aliases are registered once at startup, then one
create-annotation event is fed in per annotation found in a docblock.

Usage:
------
    LOG_LEVEL=DEBUG python examples/form_annotations.py
"""

import functools
from typing import List, Optional

from pydantic import BaseModel

from code_annotations import (
    AbstractAnnotation,
    AnnotationEvent,
    GenericAnnotationParser,
    JsonAnnotation,
    KeyValueAnnotation,
    register_annotation_class,
)

parser = GenericAnnotationParser()
register = functools.partial(register_annotation_class, parser)


@register(aliases=["Required"])
class Required(AbstractAnnotation):
    """Marks an element as required; takes no content."""


@register(aliases=["Options", "Attributes"])
class Options(JsonAnnotation):
    """Element options as a JSON object."""


class ValidatorArgs(BaseModel):
    name: str
    break_chain: bool = False
    messages: List[str] = []
    max: Optional[int] = None


@register(aliases=["Validator"])
class Validator(KeyValueAnnotation):
    """Validator specification as key=value pairs."""

    content_model = ValidatorArgs


# As a scanner would report them: (annotation name, raw content)
DOCBLOCK = [
    ("Required", ""),
    ("options", '({"label": "Your e-mail"})'),
    ("Validator", '(name="EmailAddress", max=255)'),
    ("Doctrine\\ORM\\Column", '(type="string")'),
]


def main() -> None:
    for name, content in DOCBLOCK:
        annotation = parser.on_create_annotation(AnnotationEvent.create(name, content))
        if not annotation:
            print(f"{name}: skipped")
            continue
        print(f"{name}: {annotation!r}")
        if isinstance(annotation, Validator):
            print(f"  validated: {annotation.model}")


if __name__ == "__main__":
    main()
