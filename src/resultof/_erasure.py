"""Internal type-erasure utilities for the combinators.

The fixed-arity combinators accept results with distinct success types. They
erase each input to a uniform ``Result[object, F]`` so that one variadic
routine owns the short-circuit logic; the typed wrappers restore the
individual types positionally when calling the user's transform.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

from resultof.errors import InvalidResultError
from resultof.result import Result

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def is_result(obj: object) -> TypeGuard[Result[Any, Any]]:
    """Return True if ``obj`` is a ``Success`` or ``Failure`` (internal guard)."""
    return isinstance(obj, Result)


def erase[F](results: Iterable[object]) -> Iterator[Result[object, F]]:
    """Yield each input as an erased result, validating lazily (internal).

    Inputs are pulled one at a time, so a consumer that stops early never
    touches (or validates) the remaining items.
    """
    for position, candidate in enumerate(results):
        if not is_result(candidate):
            raise InvalidResultError(
                f"Expected a Result at position {position}, "
                f"got {type(candidate).__name__}",
                hint="Wrap plain values in Success(...) or Failure(...).",
                position=position,
            )
        yield cast("Result[object, F]", candidate)


__all__ = ()  # internal-only
