"""Class decorators for registering annotation handlers."""

from typing import Any, Callable, Iterable, Optional, Type

from .logging_config import logger
from .registry import AnnotationRegistry
from .utils import qualified_name


def create_register_decorator(
    registry: AnnotationRegistry, aliases: Iterable[str] = ()
) -> Callable[[Type[Any]], Type[Any]]:
    """Create a class decorator that registers annotation handlers.

    Args:
        registry: Registry the decorated class is registered into
        aliases: Aliases pointing at the decorated class's name

    Returns:
        A decorator that registers the class and returns it unchanged.
    """
    aliases = tuple(aliases)

    def decorator(cls: Type[Any]) -> Type[Any]:
        registry.register(cls)
        name = qualified_name(cls)
        for alias in aliases:
            registry.set_alias(alias, name)

        if aliases:
            logger.debug("Annotation %s registered with aliases: %s", name, aliases)

        return cls

    return decorator


def register_annotation_class(
    registry: AnnotationRegistry,
    cls: Optional[Type[Any]] = None,
    *,
    aliases: Iterable[str] = (),
) -> Any:
    """Register an annotation class into ``registry``.

    Supports use as a plain call, or as a decorator with or without aliases:

    ```python
    annotations = GenericAnnotationParser()
    register = functools.partial(register_annotation_class, annotations)

    @register
    class Required(AbstractAnnotation): ...

    @register(aliases=["route", "url"])
    class Route(KeyValueAnnotation): ...
    ```
    """
    decorator = create_register_decorator(registry, aliases)
    if cls is None:
        return decorator
    return decorator(cls)
