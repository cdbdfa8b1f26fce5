"""Combinators that fold several results into one.

Two families share a single short-circuit rule: inputs are scanned in argument
order and the first ``Failure`` found is returned. Later inputs are never
looked at and the transform is never called. Only when every input is a
``Success`` does the transform run, with the unwrapped values in order.

- ``combine`` / ``combine_all`` wrap the transform's return value in
  ``Success``.
- ``flat_combine`` / ``flat_combine_all`` return the transform's result
  directly, so the combining step can itself fail.

The fixed-arity forms take 2 to 5 results with independent success types and
the transform as the last positional argument::

    combine(Success(2), Success("ab"), lambda n, s: s * n)  # Success("abab")

The ``*_all`` forms take any iterable of same-typed results and pass the
transform a list.
"""

from __future__ import annotations

from collections.abc import Sized
import logging
from typing import TYPE_CHECKING, Any, overload

from resultof._erasure import erase
from resultof.errors import ArityError
from resultof.result import Failure, Success, ensure_result, unreachable_variant

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from resultof.result import Result

log = logging.getLogger(__name__)

_MIN_ARITY = 2
_MAX_ARITY = 5


def _fold(
    results: Iterable[Result[object, Any]],
    transform: Callable[[list[Any]], Any],
    *,
    operation: str,
    flat: bool,
    total: int | None = None,
) -> Result[Any, Any]:
    """Short-circuit over ``results``; the only place that rule lives.

    ``total`` is the input count when known up front; it only feeds the log.
    """
    values: list[object] = []
    for position, result in enumerate(results):
        match result:
            case Failure(error=error):
                log.debug(
                    "%s short-circuited on failure at position %d of %s inputs",
                    operation,
                    position,
                    "?" if total is None else total,
                )
                return Failure(error)
            case Success(value=value):
                values.append(value)
            case _:
                unreachable_variant(result)
    if flat:
        return ensure_result(transform(values), operation=operation)
    return Success(transform(values))


def _split_fixed_arity(
    args: Sequence[Any], *, operation: str
) -> tuple[list[Result[object, Any]], Callable[..., Any]]:
    if not args or not callable(args[-1]):
        raise ArityError(
            f"{operation}() expects a transform callable as its last argument",
            hint=f"Call it as {operation}(r1, r2, ..., transform).",
        )
    *results, transform = args
    if not _MIN_ARITY <= len(results) <= _MAX_ARITY:
        raise ArityError(
            f"{operation}() accepts {_MIN_ARITY} to {_MAX_ARITY} results, got {len(results)}",
            hint=f"Use {operation}_all() for any number of same-typed results.",
        )
    # Validate every input up front; fixed-arity arguments are already evaluated.
    return list(erase(results)), transform


# --- Variadic core ---


def combine_all[T, R, F](
    results: Iterable[Result[T, F]], transform: Callable[[list[T]], R]
) -> Result[R, F]:
    """Combine any number of same-typed results into one.

    Returns the first failure in iteration order, or ``Success(transform(values))``
    when all inputs succeed. An empty input counts as all-successes. The
    iterable is consumed lazily and abandoned at the first failure.
    """
    return _fold(
        erase(results),
        transform,
        operation="combine_all",
        flat=False,
        total=len(results) if isinstance(results, Sized) else None,
    )


def flat_combine_all[T, R, F](
    results: Iterable[Result[T, F]], transform: Callable[[list[T]], Result[R, F]]
) -> Result[R, F]:
    """Like ``combine_all``, but ``transform`` returns a result of its own."""
    return _fold(
        erase(results),
        transform,
        operation="flat_combine_all",
        flat=True,
        total=len(results) if isinstance(results, Sized) else None,
    )


# --- Fixed arity: combine ---


@overload
def combine[T1, T2, R, F](
    r1: Result[T1, F],
    r2: Result[T2, F],
    transform: Callable[[T1, T2], R],
    /,
) -> Result[R, F]: ...


@overload
def combine[T1, T2, T3, R, F](
    r1: Result[T1, F],
    r2: Result[T2, F],
    r3: Result[T3, F],
    transform: Callable[[T1, T2, T3], R],
    /,
) -> Result[R, F]: ...


@overload
def combine[T1, T2, T3, T4, R, F](
    r1: Result[T1, F],
    r2: Result[T2, F],
    r3: Result[T3, F],
    r4: Result[T4, F],
    transform: Callable[[T1, T2, T3, T4], R],
    /,
) -> Result[R, F]: ...


@overload
def combine[T1, T2, T3, T4, T5, R, F](
    r1: Result[T1, F],
    r2: Result[T2, F],
    r3: Result[T3, F],
    r4: Result[T4, F],
    r5: Result[T5, F],
    transform: Callable[[T1, T2, T3, T4, T5], R],
    /,
) -> Result[R, F]: ...


def combine(*args: Any) -> Result[Any, Any]:
    """Combine 2 to 5 results with a transform over their success values.

    Returns the first failure in argument order, or
    ``Success(transform(v1, ..., vN))`` when every input succeeds.

    Raises:
        ArityError: Fewer than 2 or more than 5 results, or no transform.
        InvalidResultError: An input is not a ``Result``.
    """
    results, transform = _split_fixed_arity(args, operation="combine")
    return _fold(
        results,
        lambda values: transform(*values),
        operation="combine",
        flat=False,
        total=len(results),
    )


# --- Fixed arity: flat_combine ---


@overload
def flat_combine[T1, T2, R, F](
    r1: Result[T1, F],
    r2: Result[T2, F],
    transform: Callable[[T1, T2], Result[R, F]],
    /,
) -> Result[R, F]: ...


@overload
def flat_combine[T1, T2, T3, R, F](
    r1: Result[T1, F],
    r2: Result[T2, F],
    r3: Result[T3, F],
    transform: Callable[[T1, T2, T3], Result[R, F]],
    /,
) -> Result[R, F]: ...


@overload
def flat_combine[T1, T2, T3, T4, R, F](
    r1: Result[T1, F],
    r2: Result[T2, F],
    r3: Result[T3, F],
    r4: Result[T4, F],
    transform: Callable[[T1, T2, T3, T4], Result[R, F]],
    /,
) -> Result[R, F]: ...


@overload
def flat_combine[T1, T2, T3, T4, T5, R, F](
    r1: Result[T1, F],
    r2: Result[T2, F],
    r3: Result[T3, F],
    r4: Result[T4, F],
    r5: Result[T5, F],
    transform: Callable[[T1, T2, T3, T4, T5], Result[R, F]],
    /,
) -> Result[R, F]: ...


def flat_combine(*args: Any) -> Result[Any, Any]:
    """Combine 2 to 5 results with a transform that returns a result.

    Same short-circuit rule as ``combine``; when every input succeeds the
    transform's result is returned as-is.
    """
    results, transform = _split_fixed_arity(args, operation="flat_combine")
    return _fold(
        results,
        lambda values: transform(*values),
        operation="flat_combine",
        flat=True,
        total=len(results),
    )


__all__ = ["combine", "combine_all", "flat_combine", "flat_combine_all"]
