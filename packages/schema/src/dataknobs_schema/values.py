"""Runtime value helpers shared by every schema kind.

Boundary data arrives as plain Python objects (the output of ``json.loads``,
YAML loaders, form decoders). This module defines how those objects are
classified and rendered in error messages:

- ``UNDEFINED`` marks an absent value, e.g. a key missing from an object
- ``inspect_value`` renders a value for "got ..." messages
- ``strictly_equals`` compares literals without cross-kind equality
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


class _Undefined:
    """Type of the ``UNDEFINED`` singleton."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


def is_array(value: Any) -> bool:
    """Check whether a value is an array (list or tuple)."""
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """Check whether a value is an object (any mapping)."""
    return isinstance(value, Mapping)


def is_number(value: Any) -> bool:
    """Check whether a value is a number; ``bool`` is not a number."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def kind_of(value: Any) -> str:
    """Get the kind name of a value.

    Returns one of ``undefined``, ``null``, ``boolean``, ``number``,
    ``string``, ``array`` or ``object``.
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if is_array(value):
        return "array"
    return "object"


def render_literal(value: Any) -> str:
    """Render a scalar the way it is written in a schema description.

    Args:
        value: A scalar literal value

    Returns:
        JSON rendering, or ``undefined`` for ``UNDEFINED``
    """
    if value is UNDEFINED:
        return "undefined"
    return json.dumps(value)


def inspect_value(value: Any) -> str:
    """Describe a value for use in error messages.

    Containers and other non-scalars are described by kind only; scalars also
    include their rendering.

    Example:
        ```python
        inspect_value(None)      # 'null'
        inspect_value([1, 2])    # 'array'
        inspect_value("hello")   # 'string "hello"'
        inspect_value(123)       # 'number 123'
        ```
    """
    kind = kind_of(value)
    if kind in ("undefined", "null", "array", "object"):
        return kind
    return f"{kind} {render_literal(value)}"


def is_scalar(value: Any) -> bool:
    """Check whether a value can be used as a literal."""
    return kind_of(value) not in ("array", "object")


def strictly_equals(left: Any, right: Any) -> bool:
    """Compare two scalars for equality without cross-kind matches.

    ``True == 1`` holds in Python, but a boolean literal must never accept a
    number (nor the reverse). Integers and floats are both numbers, so
    ``1`` and ``1.0`` are equal.
    """
    if left is UNDEFINED or right is UNDEFINED or left is None or right is None:
        return left is right
    if kind_of(left) != kind_of(right):
        return False
    return bool(left == right)
