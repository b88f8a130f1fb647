"""Diagnostic context threaded through a validation pass.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import List

from .result import PathKey, ValidationError


@dataclass
class ValidationContext:
    """Tracks the current path and the errors found during a diagnostic pass.

    A context belongs to a single top-level ``parse`` or ``safe_parse`` call.
    Schemas push path segments while descending into children and record
    errors at the current location; each error gets its own copy of the path.
    """

    errors: List[ValidationError] = field(default_factory=list)
    _path: List[PathKey] = field(default_factory=list)

    @property
    def path(self) -> tuple:
        """The current location as a tuple of keys."""
        return tuple(self._path)

    @property
    def has_errors(self) -> bool:
        """Whether any errors have been recorded."""
        return len(self.errors) > 0

    def add_error(self, message: str) -> None:
        """Record an error at the current path.

        Args:
            message: Human-readable error message
        """
        self.errors.append(ValidationError(tuple(self._path), message))

    @contextmanager
    def at(self, *keys: PathKey) -> Iterator[ValidationContext]:
        """Descend into a child location for the duration of the block.

        Args:
            *keys: Property names or array indexes to append to the path
        """
        self._path.extend(keys)
        try:
            yield self
        finally:
            del self._path[len(self._path) - len(keys):]
