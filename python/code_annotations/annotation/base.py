"""Annotation capability contract and a convenience base class."""

import json
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..exceptions import AnnotationContentError

# key=value pairs; values may be quoted strings or flat arrays containing commas
_PAIR_PATTERN = re.compile(
    r"""\s*(?P<key>[A-Za-z_][\w.\-]*)\s*=\s*
        (?P<value>"(?:[^"\\]|\\.)*"
                 |\[(?:"(?:[^"\\]|\\.)*"|[^"\]])*\]
                 |[^,]*?)
        \s*(?:,|$)""",
    re.VERBOSE,
)


class AnnotationInterface(ABC):
    """Contract every registered annotation handler implements.

    A registry keeps one instance of each handler as a prototype and hands
    out deep copies of it, so implementations must be copyable and must keep
    all parsed state on the instance.
    """

    @abstractmethod
    def initialize(self, content: str) -> None:
        """Parse the annotation content.

        Args:
            content: Raw annotation content with the enclosing parentheses
                already removed

        Raises:
            Exception: Any handler-defined error when content is malformed
        """
        pass


class AbstractAnnotation(AnnotationInterface):
    """Base annotation that remembers its raw content.

    Subclasses override :meth:`initialize` and may use the parsing helpers,
    which raise :class:`AnnotationContentError` on malformed input.
    """

    def __init__(self) -> None:
        self.content: Optional[str] = None

    def initialize(self, content: str) -> None:
        self.content = content

    @staticmethod
    def parse_json_content(content: str) -> Any:
        """Decode a JSON literal."""
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise AnnotationContentError(
                f"Invalid JSON annotation content {content!r}: {e.msg}"
            ) from e

    @staticmethod
    def parse_key_value_content(content: str) -> Dict[str, Any]:
        """Parse ``key=value`` pairs separated by commas.

        Values that decode as JSON (numbers, booleans, null, quoted strings,
        flat arrays) are decoded; anything else is kept as a stripped string.
        """
        values: Dict[str, Any] = {}
        content = content.strip()
        position = 0
        while position < len(content):
            match = _PAIR_PATTERN.match(content, position)
            if match is None or match.end() == position:
                raise AnnotationContentError(
                    f"Invalid key=value annotation content {content!r} "
                    f"at offset {position}"
                )
            key, raw_value = match.group("key"), match.group("value")
            if key in values:
                raise AnnotationContentError(
                    f"Duplicate key {key!r} in annotation content {content!r}"
                )
            try:
                values[key] = json.loads(raw_value)
            except json.JSONDecodeError:
                values[key] = raw_value
            position = match.end()
        return values

    def __repr__(self) -> str:
        return f"{type(self).__name__}(content={self.content!r})"
