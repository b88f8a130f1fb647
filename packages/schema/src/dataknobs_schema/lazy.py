"""Deferred schemas for recursive and mutually recursive definitions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from .exceptions import SchemaDefinitionError
from .schema import Schema

if TYPE_CHECKING:
    from collections.abc import Callable

    from .context import ValidationContext
    from .result import ParseResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LazySchema(Schema[T]):
    """Schema resolved from a thunk on first use.

    The thunk runs at validation time, so it may refer to a schema variable
    that is assigned after the lazy schema is created. The resolved schema is
    cached; thunks must return the same schema every time and must terminate.

    Example:
        ```python
        category = lazy(lambda: object_({
            "name": string(),
            "subcategories": array(category),
        }))
        ```
    """

    def __init__(self, getter: Callable[[], Schema[T]]):
        self.getter = getter
        self._resolved: Schema[T] | None = None

    @property
    def input_type(self) -> str:
        return "lazy"

    def resolve(self) -> Schema[T]:
        """Get the schema produced by the thunk, calling it on first use.

        Raises:
            SchemaDefinitionError: If the thunk does not return a schema
        """
        if self._resolved is None:
            schema = self.getter()
            if not isinstance(schema, Schema):
                raise SchemaDefinitionError(
                    f"Lazy schema thunk must return a Schema, got {type(schema).__name__}"
                )
            logger.debug("Resolved lazy schema to %r", schema)
            self._resolved = schema
        return self._resolved

    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        return self.resolve().check(value, context)


def lazy(getter: Callable[[], Schema[T]]) -> LazySchema[T]:
    """Create a schema that defers to ``getter()`` at validation time."""
    return LazySchema(getter)


__all__ = ["LazySchema", "lazy"]
