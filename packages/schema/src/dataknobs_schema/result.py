"""Validation result types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Tuple, Union

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

PathKey = Union[str, int, Any]
Path = Tuple[PathKey, ...]


def format_path(path: Sequence[PathKey]) -> str:
    """Render a path as ``/a/0/b``; the root renders as ``/``."""
    return "/" + "/".join(str(key) for key in path)


@dataclass(frozen=True)
class ValidationError:
    """A single validation failure at a location in the input.

    This is a value object, not an exception; ``parse`` raises
    ``ValidationException`` which carries a tuple of these.
    """

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (at path {format_path(self.path)})"


def format_errors(errors: Iterable[ValidationError]) -> str:
    """Summarize errors into the message used by ``parse`` and ``safe_parse``.

    Args:
        errors: Errors collected by a diagnostic pass

    Returns:
        ``"Validation failed: "`` followed by each error, comma separated
    """
    return "Validation failed: " + ", ".join(str(error) for error in errors)


@dataclass
class ParseResult:
    """Outcome of one ``Schema.check`` call.

    A failed result carries no details; those are recorded on the
    ``ValidationContext`` during a diagnostic pass.
    """

    valid: bool
    value: Any = None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    @classmethod
    def success(cls, value: Any) -> ParseResult:
        """Create a successful result holding the parsed value."""
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls) -> ParseResult:
        """Create a failed result."""
        return cls(valid=False)


@dataclass(frozen=True)
class SafeParseResult:
    """Result returned by ``Schema.safe_parse``.

    On success ``data`` holds the parsed value. On failure ``message`` holds
    the summary and ``errors`` the structured list.
    """

    success: bool
    data: Any = None
    message: str | None = None
    errors: Tuple[ValidationError, ...] = ()

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check success."""
        return self.success

    @classmethod
    def passed(cls, data: Any) -> SafeParseResult:
        """Create a successful result.

        Args:
            data: The parsed value

        Returns:
            Successful SafeParseResult
        """
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, errors: Sequence[ValidationError]) -> SafeParseResult:
        """Create a failed result.

        Args:
            errors: Errors collected by the diagnostic pass

        Returns:
            Failed SafeParseResult with the summary message
        """
        return cls(success=False, message=format_errors(errors), errors=tuple(errors))
