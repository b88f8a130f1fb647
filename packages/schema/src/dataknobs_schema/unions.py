"""Union schemas: ordered alternatives and discriminator-based dispatch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .exceptions import SchemaDefinitionError
from .objects import ObjectSchema
from .result import ParseResult
from .schema import Schema
from .values import UNDEFINED, inspect_value, is_object

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .context import ValidationContext


class UnionSchema(Schema[Any]):
    """Accepts a value matching any of several schemas.

    Branches are tried in order and the first success wins. When none match,
    the diagnostic pass runs every branch at the same path so that the
    errors from all branches are reported together.
    """

    def __init__(self, options: Sequence[Schema[Any]]):
        self.options = tuple(options)

    @property
    def input_type(self) -> str:
        if not self.options:
            return "never"
        return " | ".join(option.input_type for option in self.options)

    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        for option in self.options:
            result = option.check(value)
            if result.valid:
                return result

        if context is not None:
            error_count = len(context.errors)
            for option in self.options:
                option.check(value, context)
            if len(context.errors) == error_count:
                context.add_error(f"Expected {self.input_type}, got {inspect_value(value)}")
        return ParseResult.failure()


class DiscriminatedUnionSchema(Schema[Any]):
    """Accepts objects whose discriminator field selects one branch.

    Every branch is an ``ObjectSchema`` declaring the discriminator field,
    normally as a literal. Validation looks up the branches accepting the
    input's discriminator value and delegates to the single match, so only
    one branch is fully validated.

    Branch discriminator values are expected to be distinct. This is not
    enforced at construction; an input whose value is accepted by more than
    one branch fails as ambiguous.
    """

    def __init__(self, discriminator: str, options: Iterable[ObjectSchema]):
        """Initialize discriminated union.

        Args:
            discriminator: Name of the field that selects the branch
            options: Object schemas, each declaring the discriminator field

        Raises:
            SchemaDefinitionError: If a branch is not an object schema or
                does not declare the discriminator
        """
        branches = tuple(options)
        for index, option in enumerate(branches):
            if not isinstance(option, ObjectSchema):
                raise SchemaDefinitionError(
                    f"Discriminated union branch {index} must be an object schema, "
                    f"got {type(option).__name__}",
                    context={"discriminator": discriminator, "branch": index},
                )
            if discriminator not in option.shape:
                raise SchemaDefinitionError(
                    f"Discriminated union branch {index} does not declare "
                    f"discriminator '{discriminator}'",
                    context={"discriminator": discriminator, "branch": index},
                )
        self.discriminator = discriminator
        self.options = branches

    @property
    def input_type(self) -> str:
        return " | ".join(option.input_type for option in self.options)

    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        if not is_object(value):
            if context is not None:
                context.add_error(f"Expected object, got {inspect_value(value)}")
            return ParseResult.failure()

        tag = value.get(self.discriminator, UNDEFINED)
        matches = [
            option
            for option in self.options
            if option.shape[self.discriminator].check(tag).valid
        ]

        if len(matches) == 1:
            return matches[0].check(value, context)

        if context is not None:
            with context.at(self.discriminator):
                if not matches:
                    context.add_error(f"Invalid discriminator value {inspect_value(tag)}")
                else:
                    context.add_error(f"Ambiguous discriminator value {inspect_value(tag)}")
        return ParseResult.failure()


def union(options: Sequence[Schema[Any]]) -> UnionSchema:
    """Create a schema accepting any of ``options``, tried in order."""
    return UnionSchema(options)


def discriminated_union(
    discriminator: str, options: Iterable[ObjectSchema]
) -> DiscriminatedUnionSchema:
    """Create a union of object schemas dispatched on one field.

    Example:
        ```python
        shape = discriminated_union("kind", [
            object_({"kind": literal("circle"), "radius": number()}),
            object_({"kind": literal("square"), "size": number()}),
        ])
        shape.parse({"kind": "circle", "radius": 10})
        ```
    """
    return DiscriminatedUnionSchema(discriminator, options)


def optional(schema: Schema[Any]) -> UnionSchema:
    """Create a schema accepting ``schema`` values or ``UNDEFINED``."""
    return schema.optional()


def nullable(schema: Schema[Any]) -> UnionSchema:
    """Create a schema accepting ``schema`` values or ``None``."""
    return schema.nullable()


def nullish(schema: Schema[Any]) -> UnionSchema:
    """Create a schema accepting ``schema`` values, ``None`` or ``UNDEFINED``."""
    return schema.nullish()


__all__ = [
    "UnionSchema",
    "DiscriminatedUnionSchema",
    "union",
    "discriminated_union",
    "optional",
    "nullable",
    "nullish",
]
