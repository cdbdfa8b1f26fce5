"""Bridge from exception-raising code to result values.

``run_or_catch`` is the one place where a raised exception becomes a
``Failure``. Every other operation lets exceptions from caller-supplied
callables propagate untouched.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from resultof.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultof.result import Result

log = logging.getLogger(__name__)


def run_or_catch[**P, R](
    block: Callable[P, R], *args: P.args, **kwargs: P.kwargs
) -> Result[R, Exception]:
    """Run ``block`` and capture its outcome as a result.

    Args:
        block: The callable to run.
        *args: Positional arguments forwarded to ``block``.
        **kwargs: Keyword arguments forwarded to ``block``.

    Returns:
        ``Success`` with the return value, or ``Failure`` holding the exact
        exception instance that was raised.

    Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
    ``SystemExit`` and other ``BaseException`` signals (including
    ``asyncio.CancelledError``) propagate.

    Example:
        result = run_or_catch(json.loads, payload)
        data = result.recover(lambda _exc: {}).get_or_none()
    """
    try:
        return Success(block(*args, **kwargs))
    except Exception as exc:
        log.debug(
            "run_or_catch captured %s from %s",
            type(exc).__name__,
            getattr(block, "__qualname__", repr(block)),
        )
        return Failure(exc)


def catching[**P, R](func: Callable[P, R]) -> Callable[P, Result[R, Exception]]:
    """Decorate ``func`` so each call returns a result instead of raising.

    Example:
        @catching
        def load(path: str) -> bytes:
            return Path(path).read_bytes()

        load("missing.bin")  # Failure(FileNotFoundError(...))
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[R, Exception]:
        return run_or_catch(func, *args, **kwargs)

    return wrapper


__all__ = ["catching", "run_or_catch"]
