"""Object schemas with shape introspection and strict mode.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict

from .result import ParseResult
from .schema import Schema, check_child
from .values import UNDEFINED, inspect_value, is_object

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .context import ValidationContext


class ObjectSchema(Schema[Dict[str, Any]]):
    """Schema for mappings with a declared set of fields.

    Each declared field is validated against its own schema, in declaration
    order. A missing key is validated as ``UNDEFINED``, so only fields whose
    schema accepts ``UNDEFINED`` (``optional()``, ``nullish()``) may be
    omitted. The parsed value is a new dict holding the declared fields only;
    a field whose parsed value is ``UNDEFINED`` is left out.

    Undeclared keys are dropped in permissive mode and rejected in strict mode.

    Example:
        ```python
        user = ObjectSchema({"name": string(), "age": number().optional()})
        user.parse({"name": "Ada", "extra": True})  # {'name': 'Ada'}
        user.shape["name"].parse("Grace")
        ```
    """

    def __init__(self, shape: Mapping[str, Schema[Any]], strict: bool = False):
        """Initialize object schema.

        Args:
            shape: Mapping of field name to field schema
            strict: If True, reject mappings with undeclared keys
        """
        self._shape = MappingProxyType(dict(shape))
        self._strict = strict

    @property
    def shape(self) -> Mapping[str, Schema[Any]]:
        """Read-only mapping of field name to field schema."""
        return self._shape

    @property
    def is_strict(self) -> bool:
        """Whether undeclared keys are rejected."""
        return self._strict

    @property
    def input_type(self) -> str:
        fields = ", ".join(
            f'"{key}": {schema.input_type}' for key, schema in self._shape.items()
        )
        return f"{{ {fields} }}"

    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        if not is_object(value):
            if context is not None:
                context.add_error(f"Expected object, got {inspect_value(value)}")
            return ParseResult.failure()

        valid = True
        parsed = {}
        for key, schema in self._shape.items():
            result = check_child(schema, value.get(key, UNDEFINED), key, context)
            if not result.valid:
                if context is None:
                    return result
                valid = False
                continue
            if result.value is not UNDEFINED:
                parsed[key] = result.value

        if self._strict:
            unrecognized = [key for key in value if key not in self._shape]
            if unrecognized:
                if context is not None:
                    context.add_error(
                        "Unrecognized keys: " + ", ".join(str(key) for key in unrecognized)
                    )
                return ParseResult.failure()

        return ParseResult.success(parsed) if valid else ParseResult.failure()

    def extend(self, shape: Mapping[str, Schema[Any]]) -> ObjectSchema:
        """Create an object schema with additional or replaced fields.

        Args:
            shape: Fields to add; existing fields with the same name are replaced

        Returns:
            New ObjectSchema with the same strictness
        """
        return ObjectSchema({**self._shape, **shape}, self._strict)

    def strict(self) -> ObjectSchema:
        """Create a copy that rejects undeclared keys."""
        return ObjectSchema(self._shape, True)

    def strip(self) -> ObjectSchema:
        """Create a copy that drops undeclared keys."""
        return ObjectSchema(self._shape, False)

    def partial(self) -> ObjectSchema:
        """Create a copy in which every field may be omitted."""
        return ObjectSchema(
            {key: schema.optional() for key, schema in self._shape.items()},
            self._strict,
        )


def object_(shape: Mapping[str, Schema[Any]]) -> ObjectSchema:
    """Create an object schema that ignores undeclared keys."""
    return ObjectSchema(shape)


def strict_object(shape: Mapping[str, Schema[Any]]) -> ObjectSchema:
    """Create an object schema that rejects undeclared keys."""
    return ObjectSchema(shape, strict=True)


__all__ = [
    "ObjectSchema",
    "object_",
    "strict_object",
]
