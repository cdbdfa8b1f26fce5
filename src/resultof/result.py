"""Result type for explicit, typed failure handling.

A ``Result[T, F]`` is either a ``Success`` carrying a value of type ``T`` or a
``Failure`` carrying a payload of type ``F``. Unlike exceptions, the failure
type is chosen by the caller, so expected failure modes (enums, dataclasses,
strings) can be modeled as ordinary values that must be handled explicitly.

Example:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Failure(f"not a number: {raw!r}")
        return Success(int(raw))

    match parse_port("8080").map(lambda p: p + 1):
        case Success(value):
            print(f"next port: {value}")
        case Failure(error):
            print(f"bad port: {error}")
"""

from __future__ import annotations

import dataclasses
import typing
from typing import TYPE_CHECKING, Any, Never

from resultof._dev_flags import dev_validate_enabled
from resultof.errors import InvariantViolationError

if TYPE_CHECKING:
    from collections.abc import Callable

_VARIANT_NAMES = frozenset({"Success", "Failure"})


class Result[T, F]:
    """Base of the two result variants.

    Only ``Success`` and ``Failure`` are ever instantiated. Operations dispatch
    on the variant and always hand back a result rather than mutating one.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # dataclass(slots=True) rebuilds the variants, so this runs twice for each.
        if cls.__module__ != __name__ or cls.__qualname__ not in _VARIANT_NAMES:
            raise TypeError(
                f"Cannot subclass Result with {cls.__qualname__}; "
                "the only variants are Success and Failure"
            )

    def __new__(cls, *args: Any, **kwargs: Any) -> Result[T, F]:
        if cls is Result:
            raise TypeError(
                "Result cannot be instantiated directly; use Success(...) or Failure(...)"
            )
        return super().__new__(cls)

    @property
    def is_success(self) -> bool:
        """True when this is a ``Success``."""
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        """True when this is a ``Failure``."""
        return isinstance(self, Failure)

    def get_or_none(self) -> T | None:
        """Return the success value, or None for a failure."""
        match self:
            case Success(value=value):
                return value
            case _:
                return None

    def failure_or_none(self) -> F | None:
        """Return the failure payload, or None for a success."""
        match self:
            case Failure(error=error):
                return error
            case _:
                return None

    # --- Side-effect hooks ---

    def on_success(self, action: Callable[[T], object]) -> Result[T, F]:
        """Call ``action`` with the value if this is a success; return self."""
        if isinstance(self, Success):
            action(self.value)
        return self

    def on_failure(self, action: Callable[[F], object]) -> Result[T, F]:
        """Call ``action`` with the payload if this is a failure; return self."""
        if isinstance(self, Failure):
            action(self.error)
        return self

    # --- Transforms ---

    def map[R](self, transform: Callable[[T], R]) -> Result[R, F]:
        """Transform the success value; a failure passes through unchanged."""
        match self:
            case Success(value=value):
                return Success(transform(value))
            case Failure(error=error):
                return Failure(error)
        return unreachable_variant(self)

    def map_failure[R](self, transform: Callable[[F], R]) -> Result[T, R]:
        """Transform the failure payload; a success passes through unchanged."""
        match self:
            case Failure(error=error):
                return Failure(transform(error))
            case Success(value=value):
                return Success(value)
        return unreachable_variant(self)

    def flat_map[R](self, transform: Callable[[T], Result[R, F]]) -> Result[R, F]:
        """Bind the success channel.

        For a success, the result returned by ``transform`` is handed back
        directly, so it decides the variant. A failure passes through.
        """
        match self:
            case Success(value=value):
                return ensure_result(transform(value), operation="flat_map")
            case Failure(error=error):
                return Failure(error)
        return unreachable_variant(self)

    def flat_map_failure[R](
        self, transform: Callable[[F], Result[T, R]]
    ) -> Result[T, R]:
        """Bind the failure channel; the mirror image of ``flat_map``."""
        match self:
            case Failure(error=error):
                return ensure_result(transform(error), operation="flat_map_failure")
            case Success(value=value):
                return Success(value)
        return unreachable_variant(self)

    def recover(self, transform: Callable[[F], T]) -> Result[T, F]:
        """Turn a failure into a success using ``transform``.

        A success is returned as-is and ``transform`` is not called.
        """
        match self:
            case Failure(error=error):
                return Success(transform(error))
        return self

    def flat_recover(self, transform: Callable[[F], Result[T, F]]) -> Result[T, F]:
        """Recover from a failure with a step that may itself fail."""
        match self:
            case Failure(error=error):
                return ensure_result(transform(error), operation="flat_recover")
        return self

    def combine[U, R](
        self, other: Result[U, F], transform: Callable[[T, U], R]
    ) -> Result[R, F]:
        """Combine with ``other``; same as ``combine(self, other, transform)``."""
        from resultof.combinators import combine

        return combine(self, other, transform)


@typing.final
@dataclasses.dataclass(frozen=True, slots=True)
class Success[T, F](Result[T, F]):
    """A successful result carrying ``value``."""

    value: T


@typing.final
@dataclasses.dataclass(frozen=True, slots=True)
class Failure[T, F](Result[T, F]):
    """An unsuccessful result carrying ``error``.

    ``error`` is whatever failure type the caller chose; it does not have to be
    an exception.
    """

    error: F


def ensure_result[T, F](obj: Result[T, F], *, operation: str) -> Result[T, F]:
    """Return ``obj``, checking it is a result when dev validation is on.

    Used on the return value of every callable that is contracted to produce a
    result (the ``flat_*`` family). With ``RESULTOF_VALIDATE`` unset this is a
    pass-through.
    """
    if dev_validate_enabled() and not isinstance(obj, Result):
        raise InvariantViolationError(
            f"Callable returned {type(obj).__name__}; expected Success|Failure.",
            operation=operation,
            hint="Use map() for plain values, or wrap the value in Success(...).",
        )
    return obj


def unreachable_variant(obj: object) -> Never:
    """Raise for a value that is neither ``Success`` nor ``Failure``."""
    raise TypeError(f"Unexpected Result variant: {type(obj).__name__}")


__all__ = ["Failure", "Result", "Success"]
