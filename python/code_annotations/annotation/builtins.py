"""Reference annotation handlers."""

from typing import Any, ClassVar, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

from ..exceptions import AnnotationContentError
from .base import AbstractAnnotation


class JsonAnnotation(AbstractAnnotation):
    """Annotation whose content is a single JSON literal.

    Example: ``@Options({"label": "Name", "required": true})``
    """

    def __init__(self) -> None:
        super().__init__()
        self.value: Any = None

    def initialize(self, content: str) -> None:
        self.value = self.parse_json_content(content)
        super().initialize(content)


class KeyValueAnnotation(AbstractAnnotation):
    """Annotation whose content is a comma-separated ``key=value`` list.

    Example: ``@Route(path="/users, /members", methods=["GET"], strict=true)``

    Subclasses may set ``content_model`` to a pydantic model. The parsed
    pairs are then validated into an instance of it and exposed as
    ``model``.
    """

    content_model: ClassVar[Optional[Type[BaseModel]]] = None

    def __init__(self) -> None:
        super().__init__()
        self.values: Dict[str, Any] = {}
        self.model: Optional[BaseModel] = None

    def initialize(self, content: str) -> None:
        values = self.parse_key_value_content(content)

        if self.content_model is not None:
            try:
                self.model = self.content_model.model_validate(values)
            except ValidationError as e:
                raise AnnotationContentError(
                    f"{type(self).__name__} content {content!r} failed validation: "
                    f"{e.error_count()} error(s)"
                ) from e

        self.values = values
        super().initialize(content)
