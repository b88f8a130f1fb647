"""Custom exceptions for the dataknobs_schema package.

This module defines exception types for the schema package,
built on the common exception framework from dataknobs_common.

Example:
    ```python
    from dataknobs_schema import ValidationException, number

    try:
        number().parse("5")
    except ValidationException as e:
        for error in e.errors:
            print(error.path, error.message)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dataknobs_common import (
    ConfigurationError as BaseConfigurationError,
    DataknobsError,
    ValidationError as BaseValidationError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .result import ValidationError


class SchemaError(DataknobsError):
    """Base exception for the dataknobs_schema package."""

    pass


class ValidationException(SchemaError, BaseValidationError):
    """Raised by ``Schema.parse`` when a value does not match its schema.

    The message is the same summary ``safe_parse`` reports; ``errors`` holds
    each failure with its location in the input.
    """

    def __init__(self, message: str, errors: Sequence[ValidationError]):
        self.errors = tuple(errors)
        super().__init__(message, context={"error_count": len(self.errors)})


class SchemaDefinitionError(SchemaError, BaseConfigurationError):
    """Raised when a schema is constructed or configured incorrectly.

    Examples include a non-scalar literal, a discriminated union branch that
    does not declare the discriminator, or an unknown type in a schema
    configuration.
    """

    pass


__all__ = [
    "SchemaError",
    "ValidationException",
    "SchemaDefinitionError",
]
