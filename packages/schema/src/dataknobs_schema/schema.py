"""Base schema contract with parse, safe_parse and combinators.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .context import ValidationContext
from .exceptions import ValidationException
from .result import ParseResult, PathKey, SafeParseResult, ValidationError, format_errors

if TYPE_CHECKING:
    from collections.abc import Callable

    from .unions import UnionSchema

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class Schema(ABC, Generic[T]):
    """Base class for all schemas.

    A schema is an immutable validation rule. Every kind implements ``check``;
    composites call ``check`` on their children, so a schema tree is validated
    by plain recursion.

    Validation runs in two phases. The fast pass calls ``check`` without a
    context and stops at the first failure. Only when it fails is ``check``
    called again with a ``ValidationContext``, and that diagnostic pass walks
    every child to collect all errors with their paths.
    """

    @abstractmethod
    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        """Validate a value against this schema.

        Args:
            value: Value to validate
            context: Diagnostic context; None for the fast pass

        Returns:
            ParseResult holding the parsed value on success. With a context,
            a failure records at least one error on it.
        """
        pass

    @property
    def input_type(self) -> str:
        """Human-readable description of the accepted input."""
        return type(self).__name__

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.input_type}>"

    def parse(self, value: Any) -> T:
        """Parse a value, raising on failure.

        Args:
            value: Value to parse

        Returns:
            The parsed value

        Raises:
            ValidationException: If the value does not match the schema
        """
        result = self.check(value)
        if result.valid:
            return result.value  # type: ignore[no-any-return]
        errors = self._diagnose(value)
        raise ValidationException(format_errors(errors), errors)

    def safe_parse(self, value: Any) -> SafeParseResult:
        """Parse a value without raising for validation failures.

        Args:
            value: Value to parse

        Returns:
            SafeParseResult with either the data or the errors
        """
        result = self.check(value)
        if result.valid:
            return SafeParseResult.passed(result.value)
        return SafeParseResult.failed(self._diagnose(value))

    def _diagnose(self, value: Any) -> list[ValidationError]:
        """Run the diagnostic pass for a value that failed the fast pass."""
        context = ValidationContext()
        self.check(value, context)
        if not context.has_errors:
            context.add_error("Validation failed")
        logger.debug(
            "Diagnostic pass for %r collected %d error(s)", self, len(context.errors)
        )
        return context.errors

    def transform(self, fn: Callable[[T], U]) -> Schema[U]:
        """Create a schema that validates, then converts the parsed value.

        Exceptions raised by ``fn`` are reported as validation errors at the
        current path.

        Args:
            fn: Conversion applied to the parsed value

        Returns:
            TransformSchema wrapping this schema
        """
        return TransformSchema(self, fn)

    def optional(self) -> UnionSchema:
        """Create a schema that also accepts ``UNDEFINED``."""
        from .primitives import undefined
        from .unions import UnionSchema

        return UnionSchema([undefined(), self])

    def nullable(self) -> UnionSchema:
        """Create a schema that also accepts ``None``."""
        from .primitives import null
        from .unions import UnionSchema

        return UnionSchema([null(), self])

    def nullish(self) -> UnionSchema:
        """Create a schema that also accepts ``None`` and ``UNDEFINED``."""
        from .primitives import null, undefined
        from .unions import UnionSchema

        return UnionSchema([null(), undefined(), self])


def check_child(
    schema: Schema[Any],
    value: Any,
    key: PathKey,
    context: ValidationContext | None,
) -> ParseResult:
    """Validate a child value, descending into ``key`` only when diagnosing.

    In the diagnostic pass the child is first tried without a context; the
    path is pushed and the child re-walked only if that fails.
    """
    result = schema.check(value)
    if result.valid or context is None:
        return result
    with context.at(key):
        return schema.check(value, context)


class TransformSchema(Schema[U]):
    """Validates with an inner schema, then applies a conversion."""

    def __init__(self, inner: Schema[Any], fn: Callable[[Any], U]):
        self.inner = inner
        self.fn = fn

    @property
    def input_type(self) -> str:
        return self.inner.input_type

    def check(self, value: Any, context: ValidationContext | None = None) -> ParseResult:
        result = self.inner.check(value, context)
        if not result.valid:
            return result
        try:
            return ParseResult.success(self.fn(result.value))
        except Exception as e:
            if context is not None:
                context.add_error(str(e) or type(e).__name__)
            return ParseResult.failure()
