"""Primitive schemas: scalar kinds, literals, unknown and instance checks.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any, TypeVar

from .exceptions import SchemaDefinitionError
from .result import ParseResult
from .schema import Schema
from .values import (
    UNDEFINED,
    inspect_value,
    is_number,
    is_scalar,
    render_literal,
    strictly_equals,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from .context import ValidationContext

T = TypeVar("T")


class KindSchema(Schema[T]):
    """Accepts values passing a single runtime kind check.

    Args:
        kind: Name used in descriptions and error messages
        predicate: Returns True for acceptable values
    """

    def __init__(self, kind: str, predicate: Callable[[Any], bool]):
        self.kind = kind
        self.predicate = predicate

    @property
    def input_type(self) -> str:
        return self.kind

    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        if self.predicate(value):
            return ParseResult.success(value)
        if context is not None:
            context.add_error(f"Expected {self.kind}, got {inspect_value(value)}")
        return ParseResult.failure()


class LiteralSchema(Schema[T]):
    """Accepts exactly one scalar value."""

    def __init__(self, value: T):
        if not is_scalar(value):
            raise SchemaDefinitionError(
                f"Literal values must be scalars, got {inspect_value(value)}",
                context={"value": value},
            )
        self.value = value

    @property
    def input_type(self) -> str:
        return render_literal(self.value)

    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        if strictly_equals(value, self.value):
            return ParseResult.success(value)
        if context is not None:
            context.add_error(
                f"Expected literal {render_literal(self.value)}, got {inspect_value(value)}"
            )
        return ParseResult.failure()


class UnknownSchema(Schema[Any]):
    """Accepts any value unchanged."""

    @property
    def input_type(self) -> str:
        return "unknown"

    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        return ParseResult.success(value)


class InstanceOfSchema(Schema[T]):
    """Accepts instances of a class (including subclasses)."""

    def __init__(self, cls: type[T]):
        if not isinstance(cls, type):
            raise SchemaDefinitionError(
                f"instance_of requires a class, got {type(cls).__name__}",
                context={"value": repr(cls)},
            )
        self.cls = cls

    @property
    def input_type(self) -> str:
        return self.cls.__name__

    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        if isinstance(value, self.cls):
            return ParseResult.success(value)
        if context is not None:
            context.add_error(
                f"Expected instance of {self.cls.__name__}, got {inspect_value(value)}"
            )
        return ParseResult.failure()


def string() -> Schema[str]:
    """Create a schema accepting ``str`` values."""
    return KindSchema("string", lambda value: isinstance(value, str))


def number() -> Schema[float]:
    """Create a schema accepting ``int`` and ``float`` values, but not ``bool``."""
    return KindSchema("number", is_number)


def boolean() -> Schema[bool]:
    """Create a schema accepting ``True`` and ``False``."""
    return KindSchema("boolean", lambda value: isinstance(value, bool))


def bigint() -> Schema[int]:
    """Create a schema accepting integers of any size, but not ``bool``."""
    return KindSchema(
        "bigint", lambda value: isinstance(value, int) and not isinstance(value, bool)
    )


def null() -> Schema[None]:
    """Create a schema accepting only ``None``."""
    return KindSchema("null", lambda value: value is None)


def undefined() -> Schema[Any]:
    """Create a schema accepting only ``UNDEFINED``."""
    return KindSchema("undefined", lambda value: value is UNDEFINED)


def unknown() -> Schema[Any]:
    """Create a schema accepting anything."""
    return UnknownSchema()


def literal(value: Any) -> Schema[Any]:
    """Create a schema accepting one literal value, or any of several.

    Args:
        value: A scalar (``str``, number, ``bool``, ``None`` or ``UNDEFINED``),
            or a list or tuple of scalars for an enum-like union

    Returns:
        LiteralSchema, or a UnionSchema of literals for a list of values

    Example:
        ```python
        literal("admin").parse("admin")
        color = literal(["red", "green", "blue"])
        color.parse("green")
        ```
    """
    if isinstance(value, (list, tuple)):
        from .unions import UnionSchema

        members: Sequence[Any] = value
        return UnionSchema([LiteralSchema(member) for member in members])
    return LiteralSchema(value)


def instance_of(cls: type[T]) -> Schema[T]:
    """Create a schema accepting instances of ``cls``."""
    return InstanceOfSchema(cls)


def date() -> Schema[datetime.date]:
    """Create a schema accepting ``datetime.date`` (and ``datetime``) instances."""
    return InstanceOfSchema(datetime.date)


__all__ = [
    "KindSchema",
    "LiteralSchema",
    "UnknownSchema",
    "InstanceOfSchema",
    "string",
    "number",
    "boolean",
    "bigint",
    "null",
    "undefined",
    "unknown",
    "literal",
    "instance_of",
    "date",
]
