"""Container schemas: arrays, tuples and records.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Tuple, TypeVar

from .result import ParseResult
from .schema import Schema, check_child
from .values import inspect_value, is_array, is_object

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .context import ValidationContext

T = TypeVar("T")


class ArraySchema(Schema[List[T]]):
    """Accepts a list or tuple whose items all match one schema.

    The parsed value is always a new list.
    """

    def __init__(self, item: Schema[T]):
        self.item = item

    @property
    def input_type(self) -> str:
        return f"Array<{self.item.input_type}>"

    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        if not is_array(value):
            if context is not None:
                context.add_error(f"Expected array, got {inspect_value(value)}")
            return ParseResult.failure()

        valid = True
        items = []
        for index, entry in enumerate(value):
            result = check_child(self.item, entry, index, context)
            if not result.valid:
                if context is None:
                    return result
                valid = False
                # Continue checking to collect all errors
                continue
            items.append(result.value)

        return ParseResult.success(items) if valid else ParseResult.failure()


class TupleSchema(Schema[Tuple[Any, ...]]):
    """Accepts a fixed-length array with one schema per position.

    The parsed value is always a new tuple.
    """

    def __init__(self, items: Sequence[Schema[Any]]):
        self.items = tuple(items)

    @property
    def input_type(self) -> str:
        return "[ " + ", ".join(item.input_type for item in self.items) + " ]"

    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        if not is_array(value):
            if context is not None:
                context.add_error(f"Expected array, got {inspect_value(value)}")
            return ParseResult.failure()

        if len(value) != len(self.items):
            if context is not None:
                context.add_error(
                    f"Expected array of length {len(self.items)}, "
                    f"got array of length {len(value)}"
                )
            return ParseResult.failure()

        valid = True
        parsed = []
        for index, (schema, entry) in enumerate(zip(self.items, value)):
            result = check_child(schema, entry, index, context)
            if not result.valid:
                if context is None:
                    return result
                valid = False
                continue
            parsed.append(result.value)

        return ParseResult.success(tuple(parsed)) if valid else ParseResult.failure()


class RecordSchema(Schema[Dict[Any, T]]):
    """Accepts a mapping whose values all match one schema.

    Keys are passed through without validation. The parsed value is always a
    new dict.
    """

    def __init__(self, values: Schema[T]):
        self.values = values

    @property
    def input_type(self) -> str:
        return f"Record<string, {self.values.input_type}>"

    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        if not is_object(value):
            if context is not None:
                context.add_error(f"Expected object, got {inspect_value(value)}")
            return ParseResult.failure()

        valid = True
        parsed = {}
        for key, entry in value.items():
            result = check_child(self.values, entry, key, context)
            if not result.valid:
                if context is None:
                    return result
                valid = False
                continue
            parsed[key] = result.value

        return ParseResult.success(parsed) if valid else ParseResult.failure()


def array(item: Schema[T]) -> ArraySchema[T]:
    """Create a schema for a list of ``item`` values."""
    return ArraySchema(item)


def tuple_(items: Sequence[Schema[Any]]) -> TupleSchema:
    """Create a schema for a fixed-length, positionally typed array.

    Args:
        items: One schema per position

    Returns:
        TupleSchema producing tuples
    """
    return TupleSchema(items)


def record(values: Schema[T]) -> RecordSchema[T]:
    """Create a schema for a mapping with arbitrary keys and uniform values."""
    return RecordSchema(values)


__all__ = [
    "ArraySchema",
    "TupleSchema",
    "RecordSchema",
    "array",
    "tuple_",
    "record",
]
