"""Event model passed to annotation parsers."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

CREATE_ANNOTATION = "createAnnotation"


class AnnotationEvent(BaseModel):
    """A "create annotation" notification for one annotation site.

    Attributes:
        name: Event name
        target: Object the annotation was found on, if any
        params: Event parameters; parsers read ``class`` and ``content``
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = CREATE_ANNOTATION
    target: Optional[Any] = None
    params: Dict[str, Any] = Field(default_factory=dict)

    def get_param(self, name: str, default: Any = None) -> Any:
        """Get a single parameter by name."""
        return self.params.get(name, default)

    @classmethod
    def create(
        cls, class_name: str, content: str = "", **params: Any
    ) -> "AnnotationEvent":
        """Build a create-annotation event for a class name and its content."""
        return cls(params={"class": class_name, "content": content, **params})
