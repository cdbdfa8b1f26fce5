"""Exception hierarchy for resultof.

These exceptions signal misuse of the API itself. Expected, modeled failures
travel inside ``Failure`` values and never raise.
"""

from __future__ import annotations


class ResultOfError(Exception):
    """Base exception for all resultof errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidResultError(ResultOfError, TypeError):
    """A value that is not a ``Result`` was given where one is required."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.position = position


class ArityError(ResultOfError, TypeError):
    """A combinator was called with an unsupported number of results."""


class InvariantViolationError(ResultOfError):
    """A callable broke its contract of returning a ``Result``.

    Only raised while development validation is enabled
    (``RESULTOF_VALIDATE=1``).
    """

    def __init__(
        self, message: str, *, operation: str | None = None, hint: str | None = None
    ) -> None:
        self.operation = operation
        msg = message if operation is None else f"[{operation}] {message}"
        super().__init__(msg, hint=hint)


__all__ = [
    "ArityError",
    "InvalidResultError",
    "InvariantViolationError",
    "ResultOfError",
]
